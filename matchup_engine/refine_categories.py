"""
refine_categories.py

Sub-classify showdowns where both players hold the same hand type.

A 'pairVsPair' showdown becomes 'pairVsLowerPair' when the winner's pair is
higher, 'pairVsPairKickerDecides' when the pairs match and a kicker breaks
the tie, and 'pairVsPairChop' / 'onBoardPairChop' when nobody wins.

The refiners take the winner's hand first. Passing the loser first is a
caller error; the labels do not describe which side won.
"""
from typing import Callable, Dict, Sequence

from .card_values import (
    descending_values,
    first_diverging_index,
    ranks_with_count,
    straight_top_value,
)
from .category_keys import CategoryKeyError, Verdict, category_label, parse_key
from .core_poker_mechanics import Card, EvaluatedHand


def _compare_all_cards(winner: EvaluatedHand, loser: EvaluatedHand) -> int:
    return first_diverging_index(descending_values(winner.cards), descending_values(loser.cards))


def _kickers(hand: EvaluatedHand, primary: Sequence[int]):
    return [v for v in descending_values(hand.cards) if v not in primary]


def _rank_of_count(hand: EvaluatedHand, n: int) -> int:
    ranks = ranks_with_count(hand.cards, n)
    return ranks[0] if ranks else 0


def refine_pair(winner: EvaluatedHand, loser: EvaluatedHand) -> Verdict:
    w_pair = _rank_of_count(winner, 2)
    l_pair = _rank_of_count(loser, 2)
    if w_pair != l_pair:
        return Verdict.LOWER

    # same pair -> the three side cards decide
    if first_diverging_index(_kickers(winner, [w_pair]), _kickers(loser, [l_pair])) == -1:
        return Verdict.CHOP
    return Verdict.KICKER_DECIDES


def refine_high_card(winner: EvaluatedHand, loser: EvaluatedHand) -> Verdict:
    diff = _compare_all_cards(winner, loser)
    if diff == -1:
        return Verdict.CHOP
    return Verdict.LOWER if diff == 0 else Verdict.KICKER_DECIDES


def refine_straight(winner: EvaluatedHand, loser: EvaluatedHand) -> Verdict:
    if straight_top_value(winner.cards) != straight_top_value(loser.cards):
        return Verdict.LOWER
    return Verdict.CHOP


def refine_flush(winner: EvaluatedHand, loser: EvaluatedHand) -> Verdict:
    return Verdict.CHOP if _compare_all_cards(winner, loser) == -1 else Verdict.LOWER


def refine_full_house(winner: EvaluatedHand, loser: EvaluatedHand) -> Verdict:
    # trips first, then the pair
    if _rank_of_count(winner, 3) != _rank_of_count(loser, 3):
        return Verdict.LOWER
    if _rank_of_count(winner, 2) != _rank_of_count(loser, 2):
        return Verdict.LOWER
    return Verdict.CHOP


def refine_four_of_a_kind(winner: EvaluatedHand, loser: EvaluatedHand) -> Verdict:
    w_quad = _rank_of_count(winner, 4)
    l_quad = _rank_of_count(loser, 4)
    if w_quad != l_quad:
        return Verdict.LOWER
    if first_diverging_index(_kickers(winner, [w_quad]), _kickers(loser, [l_quad])) == -1:
        return Verdict.CHOP
    return Verdict.KICKER_DECIDES


def refine_three_of_a_kind(winner: EvaluatedHand, loser: EvaluatedHand) -> Verdict:
    w_trips = _rank_of_count(winner, 3)
    l_trips = _rank_of_count(loser, 3)
    if w_trips != l_trips:
        return Verdict.LOWER
    if first_diverging_index(_kickers(winner, [w_trips]), _kickers(loser, [l_trips])) == -1:
        return Verdict.CHOP
    return Verdict.KICKER_DECIDES


def refine_two_pair(winner: EvaluatedHand, loser: EvaluatedHand) -> Verdict:
    w_pairs = ranks_with_count(winner.cards, 2)
    l_pairs = ranks_with_count(loser.cards, 2)
    if first_diverging_index(w_pairs, l_pairs) != -1:
        return Verdict.LOWER
    w_kicker = ranks_with_count(winner.cards, 1)
    l_kicker = ranks_with_count(loser.cards, 1)
    if first_diverging_index(w_kicker, l_kicker) == -1:
        return Verdict.CHOP
    return Verdict.KICKER_DECIDES


def refine_by_cards(winner: EvaluatedHand, loser: EvaluatedHand) -> Verdict:
    """Fallback for straight flushes, royal flushes and anything unrecognized"""
    return Verdict.CHOP if _compare_all_cards(winner, loser) == -1 else Verdict.KICKER_DECIDES


REFINERS: Dict[str, Callable[[EvaluatedHand, EvaluatedHand], Verdict]] = {
    'pair': refine_pair,
    'highCard': refine_high_card,
    'straight': refine_straight,
    'flush': refine_flush,
    'fullHouse': refine_full_house,
    'fourOfAKind': refine_four_of_a_kind,
    'threeOfAKind': refine_three_of_a_kind,
    'twoPair': refine_two_pair,
}


def is_board_only(hand: EvaluatedHand, board: Sequence[Card]) -> bool:
    board_cards = {str(c) for c in board}
    return all(str(c) in board_cards for c in hand.cards)


def refine_same_rank_category(
        key: str,
        winner: EvaluatedHand,
        loser: EvaluatedHand,
        is_tie: bool,
        board: Sequence[Card]
) -> str:
    """
    Refine a winner-first key such as 'pairVsPair' into
    '...Lower<Type>', '...KickerDecides', '...Chop' or 'onBoard<Type>Chop'.
    Keys for two different hand types, and strings that are not keys, pass through unchanged.
    """
    try:
        left, right = parse_key(key)
    except CategoryKeyError:
        return key
    if left != right:
        return key

    if is_tie:
        if is_board_only(winner, board) and is_board_only(loser, board):
            return category_label(left, Verdict.ON_BOARD_CHOP)
        return category_label(left, Verdict.CHOP)

    refiner = REFINERS.get(left, refine_by_cards)
    return category_label(left, refiner(winner, loser))


def is_defensive_chop(key: str, is_tie: bool) -> bool:
    """A chop label on a showdown that had a single winner points at an evaluator inconsistency"""
    return not is_tie and key.endswith('Chop')
