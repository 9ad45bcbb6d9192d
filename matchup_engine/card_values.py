"""
card_values.py

Rank arithmetic shared by the category refiners
"""
from collections import Counter
from typing import Iterable, List, Sequence

from .logging_config import get_logger
logger = get_logger(__name__)


RANK_ORDER = ['2', '3', '4', '5', '6', '7', '8', '9', 'T', 'J', 'Q', 'K', 'A']
RANK_VALUES = {r: i + 2 for i, r in enumerate(RANK_ORDER)}
WHEEL = {14, 5, 4, 3, 2}


def rank_value(card) -> int:
    """
    Numeric rank 2-14 of a card.
    Uses a numeric rank already carried by the card, otherwise parses the
    first character of its display form. Unknown ranks give 0.
    """
    for attr in ('rank', 'value'):
        value = getattr(card, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value

    rank_char = str(card)[:1].upper()
    value = RANK_VALUES.get(rank_char, 0)
    if value == 0:
        logger.warning(f"Unrecognized rank in card {card!r}; treating it as 0")
    return value


def descending_values(cards: Iterable) -> List[int]:
    return sorted((rank_value(c) for c in cards), reverse=True)


def count_by_rank(cards: Iterable) -> Counter:
    return Counter(rank_value(c) for c in cards)


def ranks_with_count(cards: Iterable, n: int) -> List[int]:
    """Rank values appearing exactly n times, highest first"""
    counts = count_by_rank(cards)
    return sorted((v for v, c in counts.items() if c == n), reverse=True)


def first_diverging_index(a: Sequence[int], b: Sequence[int]) -> int:
    """Index of the first differing position, or -1 if one is a prefix of the other"""
    for i, (x, y) in enumerate(zip(a, b)):
        if x != y:
            return i
    return -1


def straight_top_value(cards: Iterable) -> int:
    """Top card of a straight; the wheel (A-5-4-3-2) tops out at 5"""
    values = set(descending_values(cards))
    if not values:
        return 0
    if WHEEL <= values:
        return 5
    return max(values)
