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
"""Sorted mappings

A Map keeps its items in an OOBTree, sorted by key.  Reading a missing
key with ``m[key]`` is an error; ``m.at(key)`` binds the map's default
value first, much like ``dict.setdefault``.
"""

import copy
import logging

import zope.interface
from BTrees.OOBTree import OOBTree

from fcollections._base import Collection
from fcollections._base import tree_contains
from fcollections._base import tree_get
from fcollections.exceptions import KeyContractError
from fcollections.interfaces import IMap
from fcollections.optional import Optional
from fcollections.ordering import NATURAL
from fcollections.ordering import as_ordering
from fcollections.sequence import Sequence

logger = logging.getLogger('fcollections.sortedmap')

_marker = object()


@zope.interface.implementer(IMap)
class Map(Collection):
    """Keys bound to values, iterated in key order.

    items may be a mapping or an iterable of (key, value) pairs.
    default_factory is called without arguments to make the value at()
    binds to a missing key; without one that value is None.
    """

    def __init__(self, items=(), ordering=NATURAL, default_factory=None):
        self.ordering = as_ordering(ordering)
        self.default_factory = default_factory
        self.data = OOBTree()
        self.update(items)

    def update(self, items):
        """Bind all of items, replacing existing bindings, return self."""
        if isinstance(items, Map):
            items = items._elements()
        elif hasattr(items, 'items'):
            items = items.items()
        adapt = self.ordering.adapt
        data = self.data
        for key, value in items:
            data[adapt(key)] = value
        return self

    def _elements(self):
        unadapt = self.ordering.unadapt
        for stored, value in self.data.items():
            yield unadapt(stored), value

    def _empty(self):
        return self.__class__((), self.ordering, self.default_factory)

    def __copy__(self):
        result = self._empty()
        result.data.update(self.data)
        return result

    def __deepcopy__(self, memo):
        return self.__class__(copy.deepcopy(list(self._elements()), memo),
                              self.ordering, self.default_factory)

    def _default(self):
        factory = self.default_factory
        if factory is None:
            return None
        return factory()

    # Access

    def __getitem__(self, key):
        value = tree_get(self.data, self.ordering.adapt(key), _marker)
        if value is _marker:
            raise KeyContractError(key)
        return value

    def __setitem__(self, key, value):
        self.data[self.ordering.adapt(key)] = value

    def at(self, key):
        stored = self.ordering.adapt(key)
        value = self.data.get(stored, _marker)
        if value is _marker:
            value = self.data[stored] = self._default()
        return value

    def get(self, key):
        value = tree_get(self.data, self.ordering.adapt(key), _marker)
        if value is _marker:
            return Optional()
        return Optional(value)

    def __iter__(self):
        unadapt = self.ordering.unadapt
        for stored in self.data.keys():
            yield unadapt(stored)

    def __contains__(self, key):
        return tree_contains(self.data, self.ordering.adapt(key))

    def contains(self, key):
        return key in self

    def __eq__(self, other):
        if not isinstance(other, Map):
            return NotImplemented
        if len(self.data) != len(other.data):
            return False
        for mine, theirs in zip(self._elements(), other._elements()):
            if not mine == theirs:
                return False
        return True

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Queries

    def keys(self):
        return Sequence(iter(self))

    def values(self):
        return Sequence(self.data.values())

    def items(self):
        return Sequence(self._elements())

    def min_key(self):
        if not self.data:
            return Optional()
        return Optional(self.ordering.unadapt(self.data.minKey()))

    def max_key(self):
        if not self.data:
            return Optional()
        return Optional(self.ordering.unadapt(self.data.maxKey()))

    def all_of(self, predicate):
        for key, value in self._elements():
            if not predicate(key, value):
                return False
        return True

    def any_of(self, predicate):
        for key, value in self._elements():
            if predicate(key, value):
                return True
        return False

    def reduce(self, initial, reduction):
        result = initial
        for key, value in self._elements():
            result = reduction(result, key, value)
        return result

    def for_each(self, operation):
        for key, value in self._elements():
            operation(key, value)
        return self

    # Transformations

    def filter(self, predicate):
        unadapt = self.ordering.unadapt
        rejected = [stored for stored, value in self.data.items()
                    if not predicate(unadapt(stored), value)]
        for stored in rejected:
            del self.data[stored]
        return self

    def filtered(self, predicate):
        return self.copy().filter(predicate)

    def map_values(self, transform):
        result = self._empty()
        for stored, value in self.data.items():
            result.data[stored] = transform(value)
        return result

    # Mutations

    def insert(self, key, value):
        self.data.setdefault(self.ordering.adapt(key), value)
        return self

    def inserting(self, key, value):
        return self.copy().insert(key, value)

    def remove(self, key):
        stored = self.ordering.adapt(key)
        if not tree_contains(self.data, stored):
            logger.debug("%r is not in the map, nothing to remove", key)
            return self
        del self.data[stored]
        return self

    def removing(self, key):
        return self.copy().remove(key)

    def clear(self):
        self.data.clear()
        return self

    def clearing(self):
        return self._empty()
