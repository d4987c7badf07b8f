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
"""Ordered collections with a chainable functional interface

A Sequence wraps a list.  Mutating operations return the sequence
itself, so they can be chained::

  >>> Sequence([3, 1, 2]).sort_ascending().insert_back(4)
  Sequence([1, 2, 3, 4])

Each of them has a twin that leaves the sequence alone and returns a
new one (sort/sorted, insert_back/inserting_back, ...).  The twins are
implemented by applying the mutating operation to a copy.
"""

import copy
import logging
import operator

import zope.interface

from fcollections._base import Collection
from fcollections._base import as_list
from fcollections._base import check_index
from fcollections.exceptions import IndexContractError
from fcollections.exceptions import SizeMismatchError
from fcollections.interfaces import ISequence
from fcollections.optional import Optional
from fcollections.ordering import NATURAL
from fcollections.ordering import as_ordering

logger = logging.getLogger('fcollections.sequence')


@zope.interface.implementer(ISequence)
class Sequence(Collection):
    """An ordered collection of elements, duplicates allowed.

    elements may be any iterable, including another Sequence.
    default_factory is called without arguments to make the elements
    resize() adds; without one they are None.
    """

    def __init__(self, elements=(), default_factory=None):
        self.data = as_list(elements)
        self.default_factory = default_factory
        self._capacity = len(self.data)

    @classmethod
    def repeat(cls, count, element, default_factory=None):
        """Return a sequence holding count shallow copies of element."""
        return cls([copy.copy(element) for i in range(count)],
                   default_factory)

    def _elements(self):
        return iter(self.data)

    def _empty(self):
        return self.__class__((), self.default_factory)

    def __copy__(self):
        result = self.__class__(self.data, self.default_factory)
        result._capacity = self._capacity
        return result

    def __deepcopy__(self, memo):
        result = self.__class__(copy.deepcopy(self.data, memo),
                                self.default_factory)
        result._capacity = self._capacity
        return result

    # Element access

    def __getitem__(self, index):
        return self.data[check_index(index, len(self.data))]

    def __setitem__(self, index, value):
        self.data[check_index(index, len(self.data))] = value

    def __iter__(self):
        return iter(self.data)

    def __contains__(self, element):
        return element in self.data

    def __eq__(self, other):
        if not isinstance(other, Sequence):
            return NotImplemented
        return self.data == other.data

    def __ne__(self, other):
        if not isinstance(other, Sequence):
            return NotImplemented
        return self.data != other.data

    @property
    def capacity(self):
        return max(self._capacity, len(self.data))

    # Queries

    def find_first_index(self, element):
        for index, candidate in enumerate(self.data):
            if candidate == element:
                return Optional(index)
        return Optional()

    def find_last_index(self, element):
        data = self.data
        for index in range(len(data) - 1, -1, -1):
            if data[index] == element:
                return Optional(index)
        return Optional()

    def find_all_indices(self, element):
        return [index for index, candidate in enumerate(self.data)
                if candidate == element]

    # Transformations

    def map(self, transform):
        return self.__class__([transform(element) for element in self.data])

    def filter(self, predicate):
        self.data[:] = [element for element in self.data
                        if predicate(element)]
        return self

    def filtered(self, predicate):
        return self.copy().filter(predicate)

    def reverse(self):
        self.data.reverse()
        return self

    def reversed(self):
        return self.copy().reverse()

    def sort(self, less):
        ordering = as_ordering(less)
        self.data.sort(key=ordering.sort_key)
        return self

    def sorted(self, less):
        return self.copy().sort(less)

    def sort_ascending(self):
        self.data.sort()
        return self

    def sort_descending(self):
        self.data.sort(reverse=True)
        return self

    def sorted_ascending(self):
        return self.copy().sort_ascending()

    def sorted_descending(self):
        return self.copy().sort_descending()

    def zip(self, other):
        others = as_list(other)
        if len(others) != len(self.data):
            raise SizeMismatchError(len(self.data), len(others))
        return self.__class__(zip(self.data, others))

    def distinct(self, ordering=NATURAL):
        # Imported here, sortedset imports this module.
        from fcollections.sortedset import Set
        return Set(self.data, ordering)

    # Insertion

    def insert_back(self, element):
        self.data.append(element)
        return self

    def inserting_back(self, element):
        return self.copy().insert_back(element)

    def insert_front(self, element):
        self.data.insert(0, element)
        return self

    def inserting_front(self, element):
        return self.copy().insert_front(element)

    def insert_at(self, index, element):
        index = check_index(index, len(self.data), inclusive=True)
        self.data.insert(index, element)
        return self

    def inserting_at(self, index, element):
        return self.copy().insert_at(index, element)

    def insert_back_range(self, elements):
        self.data.extend(as_list(elements))
        return self

    def inserting_back_range(self, elements):
        return self.copy().insert_back_range(elements)

    def insert_front_range(self, elements):
        self.data[:0] = as_list(elements)
        return self

    def inserting_front_range(self, elements):
        return self.copy().insert_front_range(elements)

    def insert_range_at(self, index, elements):
        elements = as_list(elements)
        if not elements:
            logger.debug("Inserting an empty range at %r, nothing to do",
                         index)
            return self
        index = check_index(index, len(self.data), inclusive=True)
        self.data[index:index] = elements
        return self

    def inserting_range_at(self, index, elements):
        return self.copy().insert_range_at(index, elements)

    # Removal

    def remove_back(self):
        if not self.data:
            logger.debug("remove_back on an empty sequence, nothing to do")
            return self
        del self.data[-1]
        return self

    def removing_back(self):
        return self.copy().remove_back()

    def remove_front(self):
        if not self.data:
            logger.debug("remove_front on an empty sequence, nothing to do")
            return self
        del self.data[0]
        return self

    def removing_front(self):
        return self.copy().remove_front()

    def remove_at(self, index):
        del self.data[check_index(index, len(self.data))]
        return self

    def removing_at(self, index):
        return self.copy().remove_at(index)

    def remove_range(self, index_range):
        if not index_range.is_valid or len(self.data) < index_range.end + 1:
            logger.debug("Ignoring %r for a sequence of size %d",
                         index_range, len(self.data))
            return self
        del self.data[index_range.start:index_range.end + 1]
        return self

    def removing_range(self, index_range):
        return self.copy().remove_range(index_range)

    # Replacement

    def replace_range_at(self, index, elements):
        elements = as_list(elements)
        if not elements:
            return self
        index = operator.index(index)
        size = len(self.data)
        if index < 0 or index + len(elements) > size:
            raise IndexContractError(
                index, size,
                "cannot replace %d elements at index %r in a sequence "
                "of size %d" % (len(elements), index, size))
        self.data[index:index + len(elements)] = elements
        return self

    def replacing_range_at(self, index, elements):
        return self.copy().replace_range_at(index, elements)

    def fill(self, element):
        self.data[:] = [copy.copy(element) for i in range(len(self.data))]
        return self

    # Storage

    def clear(self):
        self._capacity = self.capacity
        del self.data[:]
        return self

    def reserve(self, count):
        if count > self._capacity:
            self._capacity = count
        return self

    def resize(self, count):
        data = self.data
        if count < len(data):
            self._capacity = self.capacity
            del data[count:]
        else:
            factory = self.default_factory
            for i in range(count - len(data)):
                data.append(factory() if factory is not None else None)
        return self
