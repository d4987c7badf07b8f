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
"""Present-or-absent results

None can't tell "found None" from "found nothing", so lookups that may
fail return an Optional instead.
"""

import zope.interface

from fcollections.exceptions import AbsentValueError
from fcollections.interfaces import IOptional


_marker = object()


@zope.interface.implementer(IOptional)
class Optional(object):
    """A value that may be missing.

    >>> Optional(3).value
    3
    >>> Optional().has_value
    False
    """

    __slots__ = '_value',

    def __init__(self, value=_marker):
        self._value = value

    @classmethod
    def of(cls, value):
        return cls(value)

    @classmethod
    def absent(cls):
        return cls()

    @classmethod
    def copy_of(cls, other):
        """Return a new optional with the state of other."""
        return cls().assign(other)

    @property
    def has_value(self):
        return self._value is not _marker

    @property
    def value(self):
        if self._value is _marker:
            raise AbsentValueError()
        return self._value

    def get(self, default=None):
        if self._value is _marker:
            return default
        return self._value

    def assign(self, other):
        if isinstance(other, Optional):
            self._value = other._value
        else:
            self._value = other
        return self

    def copy(self):
        return self.__class__(self._value)

    __copy__ = copy

    def __bool__(self):
        return self._value is not _marker

    def __eq__(self, other):
        if not isinstance(other, Optional):
            return NotImplemented
        if self._value is _marker or other._value is _marker:
            return self._value is other._value
        return self._value == other._value

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        if self._value is _marker:
            return "%s()" % self.__class__.__name__
        return "%s(%r)" % (self.__class__.__name__, self._value)
