"""
Unit tests for matchup_engine/card_values.py
"""
import unittest

from matchup_engine.card_values import (
    rank_value, descending_values, count_by_rank, ranks_with_count,
    first_diverging_index, straight_top_value,
)
from matchup_engine.core_poker_mechanics import cards_from_strings


def cards(s):
    return cards_from_strings(s.split())


class StringCard:
    """Card-like object exposing only a display form"""
    def __init__(self, text):
        self.text = text

    def __str__(self):
        return self.text


class ValueCard:
    def __init__(self, value):
        self.value = value


class TestRankValue(unittest.TestCase):
    def test_uses_numeric_rank(self):
        self.assertEqual(rank_value(cards("Ah")[0]), 14)
        self.assertEqual(rank_value(cards("2c")[0]), 2)

    def test_uses_value_attribute(self):
        self.assertEqual(rank_value(ValueCard(9)), 9)

    def test_parses_display_form(self):
        expected = {'2': 2, '9': 9, 'T': 10, 'J': 11, 'Q': 12, 'K': 13, 'A': 14}
        for char, value in expected.items():
            self.assertEqual(rank_value(StringCard(f"{char}s")), value)
        self.assertEqual(rank_value(StringCard("kd")), 13)

    def test_unknown_rank_is_zero_and_logged(self):
        with self.assertLogs('matchup_engine.card_values', level='WARNING'):
            self.assertEqual(rank_value(StringCard("Xh")), 0)
        with self.assertLogs('matchup_engine.card_values', level='WARNING'):
            self.assertEqual(rank_value(StringCard("")), 0)


class TestRankHelpers(unittest.TestCase):
    def test_descending_values_keeps_duplicates(self):
        self.assertEqual(descending_values(cards("5h Kd 5c 2s Ah")), [14, 13, 5, 5, 2])

    def test_count_by_rank(self):
        counts = count_by_rank(cards("5h Kd 5c 2s 5s"))
        self.assertEqual(counts[5], 3)
        self.assertEqual(counts[13], 1)
        self.assertEqual(counts[2], 1)

    def test_ranks_with_count(self):
        hand = cards("5h 5d Kc Ks 9s")
        self.assertEqual(ranks_with_count(hand, 2), [13, 5])
        self.assertEqual(ranks_with_count(hand, 1), [9])
        self.assertEqual(ranks_with_count(hand, 3), [])

    def test_first_diverging_index(self):
        self.assertEqual(first_diverging_index([14, 13, 9], [14, 12, 9]), 1)
        self.assertEqual(first_diverging_index([14, 13, 9], [13, 13, 9]), 0)
        self.assertEqual(first_diverging_index([14, 13, 9], [14, 13, 9]), -1)
        self.assertEqual(first_diverging_index([14, 13], [14, 13, 9]), -1)
        self.assertEqual(first_diverging_index([], [4]), -1)

    def test_straight_top_value(self):
        self.assertEqual(straight_top_value(cards("9h 8d 7c 6s 5h")), 9)
        self.assertEqual(straight_top_value(cards("Ah Kd Qc Js Th")), 14)
        self.assertEqual(straight_top_value(cards("Ah 5d 4c 3s 2h")), 5)
        self.assertEqual(straight_top_value(cards("6h 5d 4c 3s 2h")), 6)


if __name__ == '__main__':
    unittest.main()
