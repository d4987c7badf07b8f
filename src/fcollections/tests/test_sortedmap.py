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
# FOR A PARTICULAR PURPOSE.
#
##############################################################################
"""Test the sorted Map"""

import copy
import unittest

from BTrees.OOBTree import OOBTree
from zope.interface.verify import verifyObject

from fcollections.exceptions import KeyContractError
from fcollections.interfaces import IMap
from fcollections.ordering import NATURAL
from fcollections.sequence import Sequence
from fcollections.sortedmap import Map


NUMBERS = {1: "one", 2: "two", 3: "three"}


class MapTests(unittest.TestCase):

    def checkContents(self, m):
        self.assertEqual(m.size, 3)
        self.assertEqual(m[1], "one")
        self.assertEqual(m[2], "two")
        self.assertEqual(m[3], "three")

    def test_interface(self):
        self.assertTrue(verifyObject(IMap, Map(NUMBERS)))

    def test_empty(self):
        m = Map()
        self.assertEqual(m.size, 0)
        self.assertEqual(len(m), 0)
        self.assertTrue(m.is_empty)

    def test_from_dict(self):
        self.checkContents(Map(NUMBERS))

    def test_from_pairs(self):
        self.checkContents(Map([(3, "three"), (1, "one"), (2, "two")]))

    def test_from_btree_and_map(self):
        self.checkContents(Map(OOBTree(NUMBERS)))
        self.checkContents(Map(Map(NUMBERS)))

    def test_later_pairs_win(self):
        m = Map([(1, "uno"), (1, "one")])
        self.assertEqual(m[1], "one")
        self.assertEqual(m.size, 1)

    def test_iterates_in_key_order(self):
        persons = Map({"jake": 32, "mary": 26, "david": 40})
        self.assertEqual(list(persons), ["david", "jake", "mary"])
        self.assertEqual(persons.keys(), Sequence(["david", "jake", "mary"]))
        self.assertEqual(persons.values(), Sequence([40, 32, 26]))
        self.assertEqual(persons.items(),
                         Sequence([("david", 40), ("jake", 32),
                                   ("mary", 26)]))

    def test_read_missing_key(self):
        persons = Map({"jake": 32})
        self.assertEqual(persons["jake"], 32)
        self.assertRaises(KeyContractError, persons.__getitem__, "john")
        self.assertRaises(KeyError, persons.__getitem__, "john")
        self.assertEqual(persons.size, 1)

    def test_at_inserts_default(self):
        persons = Map({"jake": 32}, default_factory=int)
        self.assertEqual(persons.at("john"), 0)
        self.assertEqual(persons.size, 2)
        self.assertEqual(persons["john"], 0)
        self.assertEqual(persons.at("jake"), 32)

    def test_at_without_factory(self):
        m = Map()
        self.assertIsNone(m.at(1))
        self.assertTrue(m.contains(1))
        self.assertIsNone(m[1])

    def test_at_returns_bound_value(self):
        groups = Map(default_factory=list)
        groups.at("even").append(2)
        groups.at("even").append(4)
        self.assertEqual(groups["even"], [2, 4])

    def test_setitem(self):
        m = Map(NUMBERS)
        m[2] = "deux"
        m[4] = "four"
        self.assertEqual(m[2], "deux")
        self.assertEqual(list(m), [1, 2, 3, 4])

    def test_get(self):
        m = Map(NUMBERS)
        self.assertEqual(m.get(1).value, "one")
        self.assertFalse(m.get(5).has_value)
        self.assertTrue(Map({1: None}).get(1).has_value)

    def test_contains(self):
        m = Map(NUMBERS)
        self.assertTrue(m.contains(2))
        self.assertIn(3, m)
        self.assertFalse(m.contains(4))

    def test_incomparable_key_is_absent(self):
        m = Map(NUMBERS)
        self.assertFalse(m.contains("x"))
        self.assertNotIn("x", m)
        self.assertFalse(m.get("x").has_value)
        self.assertRaises(KeyContractError, m.__getitem__, "x")
        self.assertIs(m.remove("x"), m)
        self.assertEqual(list(m.removing("x")), [1, 2, 3])
        self.assertEqual(m.size, 3)

    def test_min_max_key(self):
        m = Map(NUMBERS, NATURAL.reversed())
        self.assertEqual(m.min_key().value, 3)
        self.assertEqual(m.max_key().value, 1)
        self.assertFalse(Map().min_key().has_value)
        self.assertFalse(Map().max_key().has_value)

    def test_custom_ordering(self):
        m = Map({"bb": 2, "a": 1, "ccc": 3}, lambda a, b: len(a) > len(b))
        self.assertEqual(list(m), ["ccc", "bb", "a"])
        self.assertEqual(m["bb"], 2)
        m["zz"] = 20
        self.assertEqual(m["bb"], 20)
        self.assertEqual(m.size, 3)

    def test_equality(self):
        self.assertEqual(Map(NUMBERS), Map(list(NUMBERS.items())))
        self.assertNotEqual(Map(NUMBERS), Map({1: "one"}))
        self.assertNotEqual(Map({1: "one"}), Map({1: "uno"}))
        self.assertNotEqual(Map(NUMBERS), NUMBERS)

    def test_clear(self):
        m = Map(NUMBERS)
        self.assertIs(m.clear(), m)
        self.assertTrue(m.is_empty)

    def test_clearing(self):
        m = Map(NUMBERS, default_factory=str)
        cleared = m.clearing()
        self.assertTrue(cleared.is_empty)
        self.assertIs(cleared.default_factory, str)
        self.assertEqual(m.size, 3)

    def test_insert(self):
        m = Map(NUMBERS)
        self.assertIs(m.insert(4, "four"), m)
        m.insert(1, "uno")
        self.assertEqual(m[1], "one")
        self.assertEqual(m[4], "four")

    def test_inserting(self):
        m = Map(NUMBERS)
        n = m.inserting(0, "zero")
        self.assertEqual(list(n), [0, 1, 2, 3])
        self.assertEqual(list(m), [1, 2, 3])

    def test_remove(self):
        m = Map(NUMBERS)
        self.assertIs(m.remove(2), m)
        m.remove(9)
        self.assertEqual(list(m), [1, 3])

    def test_removing(self):
        m = Map(NUMBERS)
        self.assertEqual(list(m.removing(1)), [2, 3])
        self.assertEqual(m.size, 3)

    def test_filter(self):
        m = Map(NUMBERS)
        self.assertIs(m.filter(lambda k, v: len(v) == 3), m)
        self.assertEqual(list(m), [1, 2])

    def test_filtered(self):
        m = Map(NUMBERS)
        self.assertEqual(list(m.filtered(lambda k, v: k > 1)), [2, 3])
        self.assertEqual(m.size, 3)

    def test_map_values(self):
        m = Map(NUMBERS)
        upper = m.map_values(str.upper)
        self.assertEqual(upper.values(), Sequence(["ONE", "TWO", "THREE"]))
        self.assertEqual(m[1], "one")

    def test_quantifiers(self):
        m = Map(NUMBERS)
        self.assertTrue(m.all_of(lambda k, v: k < 4))
        self.assertTrue(m.any_of(lambda k, v: v == "two"))
        self.assertTrue(m.none_of(lambda k, v: v == "four"))
        self.assertTrue(Map().all_of(lambda k, v: False))
        self.assertFalse(Map().any_of(lambda k, v: True))
        self.assertTrue(Map().none_of(lambda k, v: True))

    def test_reduce(self):
        m = Map(NUMBERS)
        self.assertEqual(m.reduce(0, lambda acc, k, v: acc + k), 6)
        self.assertEqual(m.reduce("", lambda acc, k, v: acc + v[0]), "ott")

    def test_for_each(self):
        seen = []
        m = Map(NUMBERS)
        self.assertIs(m.for_each(lambda k, v: seen.append((k, v))), m)
        self.assertEqual(seen, sorted(NUMBERS.items()))

    def test_copy(self):
        m = Map({1: [1]})
        shallow = copy.copy(m)
        deep = copy.deepcopy(m)
        shallow[2] = [2]
        m[1].append(5)
        self.assertEqual(m.size, 1)
        self.assertEqual(deep[1], [1])

    def test_repr(self):
        self.assertEqual(repr(Map({2: 'b', 1: 'a'})),
                         "Map([(1, 'a'), (2, 'b')])")


def test_suite():
    return unittest.defaultTestLoader.loadTestsFromName(__name__)
