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
"""Sorted sets of unique keys

A Set keeps its keys in an OOTreeSet.  Keys are sorted by the set's
ordering, NATURAL unless another one is given.  Set algebra is done by
the BTrees merge functions, which walk both trees in order.
"""

import copy
import logging

import zope.interface
from BTrees.OOBTree import OOTreeSet
from BTrees.OOBTree import difference
from BTrees.OOBTree import intersection
from BTrees.OOBTree import union

from fcollections._base import Collection
from fcollections._base import check_index
from fcollections._base import tree_contains
from fcollections.exceptions import SizeMismatchError
from fcollections.interfaces import ISet
from fcollections.optional import Optional
from fcollections.ordering import NATURAL
from fcollections.ordering import Ordering
from fcollections.ordering import as_ordering
from fcollections.sequence import Sequence

logger = logging.getLogger('fcollections.sortedset')


@zope.interface.implementer(ISet)
class Set(Collection):
    """A sorted collection of unique keys.

    keys may be any iterable.  Of several equivalent keys only the
    first one is kept.
    """

    def __init__(self, keys=(), ordering=NATURAL):
        self.ordering = as_ordering(ordering)
        self.data = OOTreeSet()
        if isinstance(keys, Set) and keys.ordering is self.ordering:
            self.data.update(keys.data)
        else:
            self.update(keys)

    def update(self, keys):
        """Add all of keys and return self."""
        if isinstance(keys, Collection):
            keys = keys._elements()
        adapt = self.ordering.adapt
        insert = self.data.insert
        for key in keys:
            insert(adapt(key))
        return self

    def _elements(self):
        unadapt = self.ordering.unadapt
        for stored in self.data:
            yield unadapt(stored)

    def _empty(self):
        return self.__class__((), self.ordering)

    def _from_tree(self, tree):
        result = self._empty()
        result.data.update(tree)
        return result

    def __copy__(self):
        return self._from_tree(self.data)

    def __deepcopy__(self, memo):
        return self.__class__(
            copy.deepcopy(list(self._elements()), memo), self.ordering)

    def _coerce(self, other):
        """Return a Set of other's keys under self's ordering."""
        if isinstance(other, Set) and other.ordering is self.ordering:
            return other
        return self.__class__(other, self.ordering)

    # Access

    def __getitem__(self, index):
        data = self.data
        index = check_index(index, len(data))
        return self.ordering.unadapt(data.keys()[index])

    def __iter__(self):
        return self._elements()

    def __contains__(self, key):
        return tree_contains(self.data, self.ordering.adapt(key))

    def contains(self, key):
        return key in self

    def __eq__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        if len(self.data) != len(other.data):
            return False
        for mine, theirs in zip(self, other):
            if not mine == theirs:
                return False
        return True

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Queries

    def min(self):
        if not self.data:
            return Optional()
        return Optional(self.ordering.unadapt(self.data.minKey()))

    def max(self):
        if not self.data:
            return Optional()
        return Optional(self.ordering.unadapt(self.data.maxKey()))

    def keys(self):
        return Sequence(self._elements())

    # Transformations

    def map(self, transform, ordering=NATURAL):
        return self.__class__(
            [transform(key) for key in self._elements()], ordering)

    def filter(self, predicate):
        unadapt = self.ordering.unadapt
        rejected = [stored for stored in self.data
                    if not predicate(unadapt(stored))]
        for stored in rejected:
            self.data.remove(stored)
        return self

    def filtered(self, predicate):
        result = self._empty()
        result.update(key for key in self._elements() if predicate(key))
        return result

    # Set algebra

    def union_with(self, other):
        return self._from_tree(union(self.data, self._coerce(other).data))

    def intersect_with(self, other):
        return self._from_tree(
            intersection(self.data, self._coerce(other).data))

    def difference_with(self, other):
        return self._from_tree(
            difference(self.data, self._coerce(other).data))

    def zip(self, other):
        if isinstance(other, Set):
            partner = other
        elif isinstance(other, (set, frozenset)):
            partner = Set(other)
        else:
            # Ordered sources pair up by their distinct keys.
            partner = Sequence(other).distinct()
        if len(partner) != len(self):
            raise SizeMismatchError(len(self), len(partner))
        return self.__class__(
            zip(self._elements(), partner._elements()),
            Ordering.lexicographic(self.ordering, partner.ordering))

    # Mutations

    def insert(self, key):
        self.data.insert(self.ordering.adapt(key))
        return self

    def inserting(self, key):
        return self.copy().insert(key)

    def remove(self, key):
        stored = self.ordering.adapt(key)
        if not tree_contains(self.data, stored):
            logger.debug("%r is not in the set, nothing to remove", key)
            return self
        self.data.remove(stored)
        return self

    def removing(self, key):
        return self.copy().remove(key)

    def clear(self):
        self.data.clear()
        return self

    def clearing(self):
        return self._empty()
