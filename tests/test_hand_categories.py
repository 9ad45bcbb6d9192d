"""
Unit tests for matchup_engine/hand_categories.py
"""
import os
import tempfile
import unittest

from matchup_engine.hand_categories import (
    build_manifest, render_manifest, sort_categories, write_manifest,
)
from matchup_engine.matchup_store import Deal, MatchupStore


DEAL = Deal(board=["2h", "3d", "4c", "5s", "9h"], p1=["Ah", "Kc"], p2=["Kd", "Qd"])


class TestSortCategories(unittest.TestCase):
    def test_orders_by_winner_then_loser_strength(self):
        keys = ["flushVsStraight", "pairVsHighCard", "onBoardStraightChop",
                "straightVsPair", "pairVsLowerPair", "highCardVsLowerHighCard",
                "royalFlushVsFourOfAKind", "flushVsPair"]
        self.assertEqual(sort_categories(keys), [
            "highCardVsLowerHighCard",
            "pairVsHighCard",
            "pairVsLowerPair",
            "straightVsPair",
            "flushVsPair",
            "flushVsStraight",
            "royalFlushVsFourOfAKind",
            "onBoardStraightChop",
        ])

    def test_same_pair_of_types_sorted_lexicographically(self):
        keys = ["pairVsPairKickerDecides", "pairVsPairChop", "pairVsLowerPair"]
        self.assertEqual(sort_categories(keys),
                         ["pairVsLowerPair", "pairVsPairChop", "pairVsPairKickerDecides"])

    def test_board_chops_last_and_lexicographic(self):
        keys = ["onBoardStraightChop", "onBoardFlushChop", "highCardVsHighCardChop"]
        self.assertEqual(sort_categories(keys),
                         ["highCardVsHighCardChop", "onBoardFlushChop", "onBoardStraightChop"])

    def test_unknown_tokens_after_known(self):
        self.assertEqual(sort_categories(["mysteryVsPair", "royalFlushVsStraightFlush"]),
                         ["royalFlushVsStraightFlush", "mysteryVsPair"])


class TestManifest(unittest.TestCase):
    def setUp(self):
        self.store = MatchupStore()
        self.store.insert("flushVsStraight", DEAL)
        self.store.insert("pairVsHighCard", DEAL)
        self.store.insert("pairVsHighCard", DEAL)
        self.store.insert("onBoardStraightChop", DEAL)

    def test_build_manifest(self):
        manifest = build_manifest(self.store)
        self.assertEqual(manifest["categories"],
                         ["pairVsHighCard", "flushVsStraight", "onBoardStraightChop"])
        self.assertEqual(manifest["counts"],
                         {"pairVsHighCard": 2, "flushVsStraight": 1, "onBoardStraightChop": 1})
        self.assertEqual(manifest["total_categories"], 3)
        self.assertEqual(manifest["total_hands"], 4)

    def test_render_manifest(self):
        text = render_manifest(build_manifest(self.store))
        self.assertTrue(text.startswith("// AUTO-GENERATED. Do not edit manually.\n"))
        self.assertIn("export const HAND_CATEGORIES = [\n  \"pairVsHighCard\",", text)
        self.assertIn("export type HandCategory = typeof HAND_CATEGORIES[number];", text)
        self.assertIn("\"pairVsHighCard\": 2", text)
        self.assertIn("export const TOTAL_CATEGORIES = 3;", text)
        self.assertIn("export const TOTAL_HANDS = 4;", text)

    def test_empty_store(self):
        text = render_manifest(build_manifest(MatchupStore()))
        self.assertIn("export const HAND_CATEGORIES = [] as const;", text)
        self.assertIn("export const TOTAL_HANDS = 0;", text)

    def test_write_manifest(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "out", "hand-categories.ts")
            manifest = write_manifest(self.store, path)
            with open(path, encoding="utf-8") as f:
                self.assertEqual(f.read(), render_manifest(manifest))


if __name__ == '__main__':
    unittest.main()
