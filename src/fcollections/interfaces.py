##############################################################################
#
# Copyright (c) 2021 Zope Foundation and Contributors.
# All Rights Reserved.
#
# This software is subject to the provisions of the Zope Public License,
# Version 2.1 (ZPL).  A copy of the ZPL should accompany this distribution.
# THIS SOFTWARE IS PROVIDED "AS IS" AND ANY AND ALL EXPRESS OR IMPLIED
# WARRANTIES ARE DISCLAIMED, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED
# WARRANTIES OF TITLE, MERCHANTABILITY, AGAINST INFRINGEMENT, AND FITNESS
# FOR A PARTICULAR PURPOSE
#
##############################################################################

from zope.interface import Attribute
from zope.interface import Interface


class IOptional(Interface):
    """A value that may be present or absent."""

    has_value = Attribute("True if a value is present.")

    value = Attribute(
        """The wrapped value.

        Reading it when no value is present raises AbsentValueError.
        """)

    def get(default=None):
        """Return the value if present, else the default."""

    def assign(other):
        """Replace the state of the optional and return it.

        If other is an IOptional, adopt its presence and value,
        otherwise the optional becomes present with other as its value.
        """

    def copy():
        """Return an independent optional with the same state."""


class IIndexRange(Interface):
    """A window [start, start + count) over positions of a sequence.

    Invalid ranges have start, count and end all equal to -1.  Two
    invalid ranges compare equal.
    """

    start = Attribute("The first position covered by the range.")

    count = Attribute("The number of positions covered.")

    end = Attribute("The last position covered, start + count - 1.")

    is_valid = Attribute("True if start >= 0 and count > 0.")


class IOrdering(Interface):
    """A strict total order over keys."""

    is_natural = Attribute(
        "True if the order is the one given by the keys' own < operator.")

    def less(a, b):
        """Return true if a sorts strictly before b."""

    def equivalent(a, b):
        """Return true if neither a nor b sorts before the other."""

    sort_key = Attribute(
        "A key function for list.sort(), None for the natural order.")

    def adapt(key):
        """Return the object stored in a BTree for key."""

    def unadapt(stored):
        """Return the key for an object returned by adapt()."""

    def reversed():
        """Return the ordering that sorts the other way around."""


class IQuantified(Interface):
    """Collections that can be tested with predicates."""

    def all_of(predicate):
        """Return true if predicate holds for every element.

        True for an empty collection.
        """

    def any_of(predicate):
        """Return true if predicate holds for at least one element.

        False for an empty collection.
        """

    def none_of(predicate):
        """Return true if predicate holds for no element.

        True for an empty collection.
        """


class ITraversable(IQuantified):

    size = Attribute("The number of elements.")

    is_empty = Attribute("True if there are no elements.")

    def __len__():
        """Return the number of elements."""

    def __iter__():
        """Iterate over the elements in collection order."""

    def reduce(initial, reduction):
        """Fold the elements from the first to the last.

        reduction is called as reduction(accumulated, element) and the
        final accumulated value is returned.  An empty collection
        returns initial.
        """

    def for_each(operation):
        """Call operation on every element in order and return self.

        The operation must not modify the collection.
        """


class ISequence(ITraversable):
    """An ordered collection that allows duplicates.

    Operations named with a verb (filter, sort, insert_at, ...) modify
    the sequence and return it.  Their participle twins (filtered,
    sorted, inserting_at, ...) return a new sequence and leave the
    receiver alone.
    """

    capacity = Attribute("The number of reserved slots, at least size.")

    def __getitem__(index):
        """Return the element at index.

        IndexContractError is raised unless 0 <= index < size.
        """

    def __setitem__(index, value):
        """Replace the element at index.

        IndexContractError is raised unless 0 <= index < size.
        """

    def find_first_index(element):
        """Return an IOptional with the first position of element."""

    def find_last_index(element):
        """Return an IOptional with the last position of element."""

    def find_all_indices(element):
        """Return a list of all the positions of element, ascending."""

    def map(transform):
        """Return a new sequence with transform applied to each element."""

    def filter(predicate):
        """Keep only the elements for which predicate holds."""

    def filtered(predicate):
        """Return the elements for which predicate holds."""

    def reverse():
        """Reverse the order of the elements."""

    def reversed():
        """Return the elements in reverse order."""

    def sort(less):
        """Sort the elements.

        less is a callable taking two elements and returning true if
        the first goes before the second, or an IOrdering.
        """

    def sorted(less):
        """Return the elements sorted, see sort()."""

    def sort_ascending():
        """Sort using the natural order of the elements."""

    def sort_descending():
        """Sort using the reverse of the natural order."""

    def sorted_ascending():
        """Return the elements sorted by their natural order."""

    def sorted_descending():
        """Return the elements sorted by the reverse natural order."""

    def zip(other):
        """Return a sequence of (self[i], other[i]) tuples.

        SizeMismatchError is raised if other has a different size.
        """

    def distinct(ordering=None):
        """Return an ISet of the unique elements."""

    def insert_back(element):
        """Append element."""

    def insert_front(element):
        """Prepend element."""

    def insert_at(index, element):
        """Insert element before position index.

        index may be equal to size, which appends.
        IndexContractError is raised unless 0 <= index <= size.
        """

    def insert_back_range(elements):
        """Append all of elements."""

    def insert_front_range(elements):
        """Prepend all of elements, keeping their order."""

    def insert_range_at(index, elements):
        """Insert all of elements before position index.

        Inserting nothing is a no-op and does not check index.
        """

    def remove_back():
        """Remove the last element, if any."""

    def remove_front():
        """Remove the first element, if any."""

    def remove_at(index):
        """Remove the element at index.

        IndexContractError is raised unless 0 <= index < size.
        """

    def remove_range(index_range):
        """Remove the positions covered by index_range.

        Nothing happens if the range is invalid or extends past the
        end of the sequence.
        """

    def replace_range_at(index, elements):
        """Overwrite the positions starting at index with elements.

        IndexContractError is raised unless index >= 0 and
        index + len(elements) <= size.
        """

    def fill(element):
        """Make every element a shallow copy of element."""

    def clear():
        """Remove all elements, keeping the capacity."""

    def reserve(count):
        """Make the capacity at least count."""

    def resize(count):
        """Truncate, or grow with default elements, to count elements."""


class ISet(ITraversable):
    """A sorted collection of unique keys."""

    ordering = Attribute("The IOrdering the keys are sorted with.")

    def __getitem__(index):
        """Return the key at sort position index.

        IndexContractError is raised unless 0 <= index < size.
        """

    def contains(key):
        """Return true if an equivalent key is in the set.

        A key that can't be compared with the keys of the set is not
        in it.
        """

    def min():
        """Return an IOptional of the first key in sort order."""

    def max():
        """Return an IOptional of the last key in sort order."""

    def keys():
        """Return an ISequence of the keys in sort order."""

    def map(transform, ordering=None):
        """Return a new set of the transformed keys.

        Keys that transform to equivalent values collapse.
        """

    def filter(predicate):
        """Keep only the keys for which predicate holds."""

    def filtered(predicate):
        """Return the keys for which predicate holds."""

    def union_with(other):
        """Return the keys in either self or other."""

    def intersect_with(other):
        """Return the keys in both self and other."""

    def difference_with(other):
        """Return the keys in self that are not in other."""

    def zip(other):
        """Return a set of (self[i], other[i]) pairs.

        An ISequence partner is reduced to its distinct keys first.
        SizeMismatchError is raised if the sizes differ.
        """

    def insert(key):
        """Add key unless an equivalent key is present."""

    def inserting(key):
        """Return a new set with key added."""

    def remove(key):
        """Remove key if present.

        A key that can't be compared with the keys of the set is never
        present.
        """

    def removing(key):
        """Return a new set without key."""

    def clear():
        """Remove all keys."""

    def clearing():
        """Return a new empty set with the same ordering."""


class IMap(IQuantified):
    """A sorted collection of keys bound to values.

    Predicates, operations and reductions receive the key and the
    value as separate arguments.
    """

    ordering = Attribute("The IOrdering the keys are sorted with.")

    size = Attribute("The number of keys.")

    is_empty = Attribute("True if there are no keys.")

    def __len__():
        """Return the number of keys."""

    def __iter__():
        """Iterate over the keys in sort order."""

    def __getitem__(key):
        """Return the value bound to key.

        KeyContractError is raised if the key is not present.
        """

    def __setitem__(key, value):
        """Bind key to value."""

    def at(key):
        """Return the value bound to key, binding a default first.

        If the key is not present it is bound to the map's default
        value.  The bound value itself is returned, so mutable values
        can be changed in place.
        """

    def get(key):
        """Return an IOptional of the value bound to key."""

    def contains(key):
        """Return true if key is present.

        A key that can't be compared with the keys of the map is not
        present; reading it raises KeyContractError.
        """

    def keys():
        """Return an ISequence of the keys in sort order."""

    def values():
        """Return an ISequence of the values in key order."""

    def items():
        """Return an ISequence of (key, value) tuples in key order."""

    def min_key():
        """Return an IOptional of the first key."""

    def max_key():
        """Return an IOptional of the last key."""

    def insert(key, value):
        """Bind key to value unless key is already present."""

    def inserting(key, value):
        """Return a new map, see insert()."""

    def remove(key):
        """Remove key if present."""

    def removing(key):
        """Return a new map without key."""

    def filter(predicate):
        """Keep only the items for which predicate(key, value) holds."""

    def filtered(predicate):
        """Return the items for which predicate(key, value) holds."""

    def map_values(transform):
        """Return a new map binding each key to transform(value)."""

    def reduce(initial, reduction):
        """Fold reduction(accumulated, key, value) over the items."""

    def for_each(operation):
        """Call operation(key, value) for every item and return self."""

    def clear():
        """Remove all items."""

    def clearing():
        """Return a new empty map with the same ordering and default."""
