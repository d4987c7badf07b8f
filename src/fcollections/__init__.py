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
"""Chainable functional collections: Sequence, Set and Map."""

from fcollections.exceptions import AbsentValueError
from fcollections.exceptions import CollectionsError
from fcollections.exceptions import ContractError
from fcollections.exceptions import IndexContractError
from fcollections.exceptions import KeyContractError
from fcollections.exceptions import SizeMismatchError
from fcollections.index_range import INVALID_RANGE
from fcollections.index_range import IndexRange
from fcollections.index_range import start_count
from fcollections.index_range import start_end
from fcollections.optional import Optional
from fcollections.ordering import NATURAL
from fcollections.ordering import Ordering
from fcollections.sequence import Sequence
from fcollections.sortedmap import Map
from fcollections.sortedset import Set


__all__ = [
    'AbsentValueError',
    'CollectionsError',
    'ContractError',
    'INVALID_RANGE',
    'IndexContractError',
    'IndexRange',
    'KeyContractError',
    'Map',
    'NATURAL',
    'Optional',
    'Ordering',
    'Sequence',
    'Set',
    'SizeMismatchError',
    'start_count',
    'start_end',
]
