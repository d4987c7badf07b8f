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
"""Behavior shared by all the collections"""

import copy
import operator

from fcollections.exceptions import IndexContractError


def check_index(index, size, inclusive=False):
    """Return index as an int, or raise IndexContractError.

    The accepted range is [0, size), or [0, size] if inclusive is true.
    Negative positions are never accepted.
    """
    index = operator.index(index)
    limit = size + 1 if inclusive else size
    if not 0 <= index < limit:
        raise IndexContractError(index, size)
    return index


def tree_contains(tree, stored):
    """Return true if stored is a key of the BTree tree.

    A key that can't be compared with the keys of the tree is not in it.
    """
    try:
        return stored in tree
    except TypeError:
        return False


def tree_get(tree, stored, default):
    """Return the value bound to stored in tree, or default."""
    try:
        return tree.get(stored, default)
    except TypeError:
        return default


def as_list(elements):
    """Return the elements of a collection or iterable as a new list."""
    if isinstance(elements, Collection):
        return list(elements._elements())
    return list(elements)


class Collection(object):
    """Base class for Sequence, Set and Map.

    Subclasses store their container in ``data`` and implement
    ``_elements()``, which iterates over what predicates receive, and
    ``_empty()``, which returns an empty collection configured like
    self.
    """

    __hash__ = None

    def _elements(self):
        raise NotImplementedError

    def _empty(self):
        raise NotImplementedError

    def __len__(self):
        return len(self.data)

    @property
    def size(self):
        return len(self.data)

    @property
    def is_empty(self):
        return not self.data

    def __bool__(self):
        return bool(self.data)

    def all_of(self, predicate):
        for element in self._elements():
            if not predicate(element):
                return False
        return True

    def any_of(self, predicate):
        for element in self._elements():
            if predicate(element):
                return True
        return False

    def none_of(self, predicate):
        return not self.any_of(predicate)

    def reduce(self, initial, reduction):
        result = initial
        for element in self._elements():
            result = reduction(result, element)
        return result

    def for_each(self, operation):
        for element in self._elements():
            operation(element)
        return self

    def copy(self):
        return copy.copy(self)

    def __copy__(self):
        raise NotImplementedError

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, list(self._elements()))
