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
"""Validated windows over sequence positions

An IndexRange is built with start_count() or start_end().  Bad
coordinates don't raise; they produce the invalid range, which batch
operations such as Sequence.remove_range() treat as a no-op.
"""

import zope.interface

from fcollections.interfaces import IIndexRange


@zope.interface.implementer(IIndexRange)
class IndexRange(object):

    __slots__ = '_start', '_count'

    def __init__(self, start, count):
        if start >= 0 and count > 0:
            self._start = start
            self._count = count
        else:
            self._start = self._count = -1

    @classmethod
    def start_count(cls, start, count):
        """Return the range of count positions beginning at start."""
        return cls(start, count)

    @classmethod
    def start_end(cls, start, end):
        """Return the range from start to end, both included.

        The range is invalid if end < start.
        """
        return cls.start_count(start, end - start + 1)

    @property
    def start(self):
        return self._start

    @property
    def count(self):
        return self._count

    @property
    def end(self):
        if self._count < 0:
            return -1
        return self._start + self._count - 1

    @property
    def is_valid(self):
        return self._count > 0

    def __setattr__(self, name, value):
        if name in self.__slots__ and not hasattr(self, name):
            object.__setattr__(self, name, value)
        else:
            raise AttributeError("IndexRange objects are immutable")

    def __eq__(self, other):
        if not isinstance(other, IndexRange):
            return NotImplemented
        return (self._start, self._count) == (other._start, other._count)

    def __ne__(self, other):
        if not isinstance(other, IndexRange):
            return NotImplemented
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self._start, self._count))

    def __reduce__(self):
        return self.__class__, (self._start, self._count)

    def __repr__(self):
        if not self.is_valid:
            return "<IndexRange invalid>"
        return "<IndexRange start=%d count=%d end=%d>" % (
            self._start, self._count, self.end)


def start_count(start, count):
    return IndexRange.start_count(start, count)


def start_end(start, end):
    return IndexRange.start_end(start, end)


INVALID_RANGE = IndexRange(-1, -1)
