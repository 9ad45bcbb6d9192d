"""
simulation.py

Deal random heads-up showdowns, classify them and collect samples per category
"""
import os
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .config import Settings
from .core_poker_mechanics import Card, Deck, EvaluatedHand, HandEvaluator, cards_to_strings
from .hand_categories import write_manifest
from .matchup_store import Deal, MatchupStore
from .normalization import normalize_winner_first
from .refine_categories import is_defensive_chop, refine_same_rank_category

from .logging_config import get_logger
logger = get_logger(__name__)


@dataclass
class Showdown:
    board: List[Card]
    player1: List[Card]
    player2: List[Card]
    hand1: EvaluatedHand
    hand2: EvaluatedHand


@dataclass
class Classification:
    key: str
    deal: Deal
    is_tie: bool
    defensive: bool = False


@dataclass
class RunStats:
    runs: int = 0
    inserted: int = 0
    discarded: int = 0
    ties: int = 0
    defensive_chops: int = 0
    elapsed_ms: float = 0.0
    categories: Counter = field(default_factory=Counter)

    def summary(self) -> str:
        return (f"{self.runs} showdowns: {self.inserted} stored, {self.discarded} over cap, "
                f"{self.ties} ties, {self.defensive_chops} unexplained chops "
                f"({self.elapsed_ms:.0f} ms)")


def generate_random_showdown(deck: Deck, evaluator=HandEvaluator) -> Showdown:
    """Deal board, then both players' hole cards, from a freshly shuffled deck"""
    deck.reset()
    board = deck.deal(5)
    player1 = deck.deal(2)
    player2 = deck.deal(2)

    # board first so a hand the board makes on its own is reported as the board cards
    hand1 = evaluator.solve(board + player1)
    hand2 = evaluator.solve(board + player2)
    return Showdown(board, player1, player2, hand1, hand2)


def classify_showdown(showdown: Showdown, evaluator=HandEvaluator) -> Classification:
    norm = normalize_winner_first(
        showdown.hand1, showdown.hand2, showdown.player1, showdown.player2,
        oracle=evaluator.winners,
    )
    key = refine_same_rank_category(norm.key, norm.winner, norm.loser, norm.is_tie, showdown.board)
    deal = Deal(
        board=cards_to_strings(showdown.board),
        p1=cards_to_strings(norm.p1),
        p2=cards_to_strings(norm.p2),
    )
    return Classification(key, deal, norm.is_tie, is_defensive_chop(key, norm.is_tie))


class MatchupSimulator:
    """Runs showdowns into a store it is handed; owns no persistence"""

    def __init__(self, store: MatchupStore, rng: Optional[np.random.Generator] = None,
                 evaluator=HandEvaluator):
        self.store = store
        self.deck = Deck(rng=rng)
        self.evaluator = evaluator

    def step(self, stats: RunStats) -> Classification:
        showdown = generate_random_showdown(self.deck, self.evaluator)
        result = classify_showdown(showdown, self.evaluator)

        stats.runs += 1
        stats.categories[result.key] += 1
        if result.is_tie:
            stats.ties += 1
        if result.defensive:
            stats.defensive_chops += 1
            logger.warning(
                f"{result.key} with a declared winner: "
                f"{showdown.hand1.description} vs {showdown.hand2.description} "
                f"on {' '.join(result.deal.board)}"
            )

        if self.store.insert(result.key, result.deal):
            stats.inserted += 1
        else:
            stats.discarded += 1
        return result

    def run(self, runs: int) -> RunStats:
        stats = RunStats()
        start = time.perf_counter()
        for _ in range(runs):
            self.step(stats)
        stats.elapsed_ms = (time.perf_counter() - start) * 1000
        return stats


def run_batch(runs: int, settings: Settings) -> RunStats:
    """Load the store, simulate, then persist the store and the manifest"""
    store = MatchupStore.load(settings.matchups_path, settings.max_per_category)
    rng = np.random.default_rng(settings.seed)

    simulator = MatchupSimulator(store, rng=rng)
    stats = simulator.run(runs)

    store.save(settings.matchups_path)
    write_manifest(store, settings.manifest_path)

    logger.info(f"Saved matchups and updated {settings.manifest_file}: {stats.summary()}")
    return stats


def clear_output_folder(output_dir: str) -> int:
    """Delete the files in output_dir; returns how many were removed"""
    try:
        files = os.listdir(output_dir)
    except FileNotFoundError:
        logger.info(f"{output_dir}/ folder does not exist.")
        return 0

    removed = 0
    for name in files:
        path = os.path.join(output_dir, name)
        if os.path.isfile(path):
            os.remove(path)
            removed += 1
    logger.info(f"Cleared {removed} files in {output_dir}/")
    return removed
