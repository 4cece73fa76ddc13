#!/usr/bin/env python3

import unittest
from collections import Counter

from core.combination_generator import CombinationGenerator
from core.letters import LetterMultiset
from core.matcher import SubsetMatcher
from tests.fixtures.dictionary_helpers import HEAT_DICT, SCENARIO_DICT, create_test_index


def _combined(combo) -> LetterMultiset:
    return LetterMultiset.from_string("".join(combo))


class TestCombinationGenerator(unittest.TestCase):

    def setUp(self):
        self.bag = LetterMultiset.from_string("heat")
        self.pool = SubsetMatcher(create_test_index(HEAT_DICT)).match(self.bag)

    def test_pool_order(self):
        self.assertEqual(["heat", "eat", "at", "he"], self.pool)

    def test_heat_combinations(self):
        combos = CombinationGenerator(max_combinations=5).generate(self.pool, self.bag)
        self.assertEqual(
            [("heat",), ("at", "he"), ("eat",), ("at",), ("he",)],
            combos)

    def test_cap_is_hard_stop(self):
        combos = CombinationGenerator(max_combinations=3).generate(self.pool, self.bag)
        self.assertEqual([("heat",), ("eat",), ("at",)], combos)

    def test_zero_cap(self):
        self.assertEqual([], CombinationGenerator(max_combinations=0).generate(self.pool, self.bag))

    def test_empty_pool(self):
        self.assertEqual([], CombinationGenerator().generate([], self.bag))

    def test_unformable_pool_words_ignored(self):
        combos = CombinationGenerator().generate(["zoo", "at"], self.bag)
        self.assertEqual([("at",)], combos)

    def test_pool_size_limits_candidates(self):
        combos = CombinationGenerator(pool_size=1).generate(self.pool, self.bag)
        self.assertEqual([("heat",)], combos)

    def test_mixed_case_pool_words_kept(self):
        combos = CombinationGenerator().generate(["HEAT", "At"], self.bag)
        self.assertEqual([("HEAT",), ("At",)], combos)

    def test_word_used_at_most_once(self):
        bag = LetterMultiset.from_string("atat")
        combos = CombinationGenerator().generate(["at"], bag)
        self.assertEqual([("at",)], combos)

    def test_combinations_fit_in_bag(self):
        bag = LetterMultiset.from_string("heatstarmindfire")
        pool = SubsetMatcher(create_test_index(SCENARIO_DICT)).match(bag)
        combos = CombinationGenerator(max_combinations=20).generate(pool, bag)
        self.assertEqual(20, len(combos))
        for combo in combos:
            self.assertTrue(bag.can_form(_combined(combo)), combo)
            self.assertEqual(len(combo), len(set(combo)))

    def test_ranked_by_total_length(self):
        bag = LetterMultiset.from_string("heatstarmindfire")
        pool = SubsetMatcher(create_test_index(SCENARIO_DICT)).match(bag)
        combos = CombinationGenerator(max_combinations=20).generate(pool, bag)
        totals = [sum(len(w) for w in combo) for combo in combos]
        self.assertEqual(sorted(totals, reverse=True), totals)
        self.assertEqual(("fire", "heat", "mind", "star"), combos[0])

    def test_both_partial_and_extended_sequences_recorded(self):
        bag = LetterMultiset.from_string("heatstarmindfire")
        combos = CombinationGenerator().generate(["fire", "heat"], bag)
        self.assertEqual(Counter([("fire", "heat"), ("fire",), ("heat",)]), Counter(combos))


if __name__ == '__main__':
    unittest.main()
