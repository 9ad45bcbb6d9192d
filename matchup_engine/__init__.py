"""
matchup_engine

Heads-up showdown generator that buckets each result into a matchup category
such as 'flushVsStraight' or 'pairVsPairKickerDecides'.
"""
from .category_keys import HandType, Verdict, build_key, parse_key, to_token
from .core_poker_mechanics import Card, Deck, EvaluatedHand, HandEvaluator, HandRank, Suit
from .matchup_store import Deal, MatchupStore, MAX_PER_CATEGORY
from .normalization import NormalizedShowdown, normalize_winner_first
from .refine_categories import refine_same_rank_category

__all__ = [
    "Card", "Deck", "EvaluatedHand", "HandEvaluator", "HandRank", "Suit",
    "HandType", "Verdict", "build_key", "parse_key", "to_token",
    "Deal", "MatchupStore", "MAX_PER_CATEGORY",
    "NormalizedShowdown", "normalize_winner_first",
    "refine_same_rank_category",
]
