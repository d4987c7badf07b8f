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
"""Orderings for sorted collections

Set and Map keep their keys in object BTrees, which compare keys with
their own rich comparison methods.  An Ordering other than NATURAL
wraps every key in an OrderedKey before it goes into a tree, so the tree
sorts by the ordering instead.  Collections unwrap keys on the way out;
callers never see an OrderedKey.

min() and max() of a sorted collection follow its ordering.  With an
ordering derived from a hash, they are the keys with the smallest and
largest hash, not the "smallest" and "largest" keys in any intuitive
sense.
"""

import functools
import operator

import zope.interface

from fcollections.interfaces import IOrdering


@functools.total_ordering
class OrderedKey(object):
    """A key as stored in a BTree under a non-natural ordering."""

    __slots__ = 'key', 'ordering'

    def __init__(self, key, ordering):
        self.key = key
        self.ordering = ordering

    def __lt__(self, other):
        return self.ordering.less(self.key, other.key)

    def __gt__(self, other):
        return self.ordering.less(other.key, self.key)

    def __eq__(self, other):
        if not isinstance(other, OrderedKey):
            return NotImplemented
        return self.ordering.equivalent(self.key, other.key)

    __hash__ = None

    def __repr__(self):
        return "OrderedKey(%r)" % (self.key,)


@zope.interface.implementer(IOrdering)
class Ordering(object):
    """A strict total order defined by a less-than predicate.

    The predicate must be irreflexive: less(a, a) is false.  A
    predicate like <= sorts fine by accident in some cases, but makes
    every key look distinct from itself to the sorted collections.
    """

    is_natural = False

    def __init__(self, less):
        self._less = less

    @classmethod
    def from_cmp(cls, cmp):
        """Build an ordering from a three-way comparison function."""
        return cls(lambda a, b: cmp(a, b) < 0)

    @classmethod
    def by_key(cls, key):
        """Order by the natural order of key(element)."""
        return cls(lambda a, b: key(a) < key(b))

    @classmethod
    def lexicographic(cls, first, second):
        """Order pairs by first on their first item, then by second."""
        if first.is_natural and second.is_natural:
            return NATURAL

        def less(a, b):
            if first.less(a[0], b[0]):
                return True
            if first.less(b[0], a[0]):
                return False
            return second.less(a[1], b[1])

        return cls(less)

    def less(self, a, b):
        return bool(self._less(a, b))

    def equivalent(self, a, b):
        return not self.less(a, b) and not self.less(b, a)

    def compare(self, a, b):
        if self.less(a, b):
            return -1
        if self.less(b, a):
            return 1
        return 0

    @property
    def sort_key(self):
        return functools.cmp_to_key(self.compare)

    def adapt(self, key):
        return OrderedKey(key, self)

    def unadapt(self, stored):
        return stored.key

    def reversed(self):
        less = self._less
        return Ordering(lambda a, b: less(b, a))

    def __repr__(self):
        return "<%s %r>" % (self.__class__.__name__, self._less)


class _NaturalOrdering(Ordering):
    """The order given by the < operator of the keys themselves."""

    is_natural = True

    def __init__(self):
        Ordering.__init__(self, operator.lt)

    @property
    def sort_key(self):
        return None

    def adapt(self, key):
        return key

    def unadapt(self, stored):
        return stored

    def __reduce__(self):
        return 'NATURAL'

    def __repr__(self):
        return "<Ordering NATURAL>"


NATURAL = _NaturalOrdering()


def as_ordering(ordering):
    """Return the Ordering described by ordering.

    ordering may be None (the natural order), an Ordering, or a less-than
    predicate.
    """
    if ordering is None:
        return NATURAL
    if IOrdering.providedBy(ordering):
        return ordering
    if callable(ordering):
        return Ordering(ordering)
    raise TypeError("expected an ordering or a less-than predicate, got %r"
                    % (ordering,))
