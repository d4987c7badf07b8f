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
"""fcollections-defined exceptions

Every error raised by the package itself derives from CollectionsError.
Contract violations additionally derive from the builtin exception a
caller would expect from a plain list or dict, so ``except IndexError``
keeps working.
"""


class CollectionsError(Exception):
    """Functional collections error."""


class ContractError(CollectionsError):
    """A caller broke the contract of an operation.

    These are programming errors.  The collection involved is left in
    the state it had before the failing call.
    """


class IndexContractError(ContractError, IndexError):
    """A position is outside of the range an operation accepts.

    Instance attributes:
      index : int
        the offending position
      size : int
        the size of the collection when the error was detected
    """

    def __init__(self, index, size, message=None):
        self.index = index
        self.size = size
        if message is None:
            message = "index %r out of range for size %d" % (index, size)
        self.message = message
        ContractError.__init__(self, message)

    def __str__(self):
        return self.message


class SizeMismatchError(ContractError, ValueError):
    """Two collections that must have the same size do not."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        ContractError.__init__(self, expected, actual)

    def __str__(self):
        return "size mismatch: expected %d elements, got %d" % (
            self.expected, self.actual)


class AbsentValueError(ContractError, LookupError):
    """The value of an absent Optional was read."""

    def __str__(self):
        return "optional has no value"


class KeyContractError(ContractError, KeyError):
    """A key that must be present in a map is not."""

    def __str__(self):
        return "key %r is not present" % (self.args[0],)
