"""
normalization.py

Put the winner on the left of a category key and in the p1 seat
"""
from dataclasses import dataclass
from typing import Callable, List, Sequence

from .category_keys import build_key
from .core_poker_mechanics import EvaluatedHand, HandEvaluator

WinnerOracle = Callable[[Sequence[EvaluatedHand]], List[EvaluatedHand]]


@dataclass
class NormalizedShowdown:
    key: str
    p1: list
    p2: list
    is_tie: bool
    winner: EvaluatedHand  # hand1 on a tie
    loser: EvaluatedHand   # hand2 on a tie


def normalize_winner_first(
        hand1: EvaluatedHand,
        hand2: EvaluatedHand,
        player1: list,
        player2: list,
        oracle: WinnerOracle = HandEvaluator.winners
) -> NormalizedShowdown:
    """
    Build a 'WinnerVsLoser' key and reorder the hole cards so p1 is the winner's.
    On a tie the original order is kept.
    """
    winners = oracle([hand1, hand2])

    if len(winners) != 1:
        return NormalizedShowdown(
            key=build_key(hand1.name, hand2.name),
            p1=player1,
            p2=player2,
            is_tie=True,
            winner=hand1,
            loser=hand2,
        )

    winner_is_p1 = winners[0] is hand1
    winner, loser = (hand1, hand2) if winner_is_p1 else (hand2, hand1)

    return NormalizedShowdown(
        key=build_key(winner.name, loser.name),
        p1=player1 if winner_is_p1 else player2,
        p2=player2 if winner_is_p1 else player1,
        is_tie=False,
        winner=winner,
        loser=loser,
    )
