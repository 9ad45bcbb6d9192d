"""
core_poker_mechanics.py

Cards, deck and the 5-of-7 hand evaluator that decides showdowns
"""
import itertools
from dataclasses import dataclass, field
from collections import Counter
from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np


RANK_CHARS = '23456789TJQKA'


class Suit(Enum):
    CLUBS = 'c'
    DIAMONDS = 'd'
    HEARTS = 'h'
    SPADES = 's'


@dataclass(frozen=True)
class Card:
    rank: int  # 2-14 (2-9, T=10, J=11, Q=12, K=13, A=14)
    suit: Suit

    def __post_init__(self):
        if not 2 <= self.rank <= 14:
            raise ValueError(f"invalid rank {self.rank}")

    def __str__(self):
        return f"{RANK_CHARS[self.rank - 2]}{self.suit.value}"

    @classmethod
    def from_str(cls, token: str) -> 'Card':
        """Parse a two-character card such as 'Th' or 'As'"""
        token = token.strip()
        if len(token) != 2:
            raise ValueError(f"invalid card token: {token!r}")
        rank_char, suit_char = token[0].upper(), token[1].lower()
        if rank_char not in RANK_CHARS:
            raise ValueError(f"invalid rank in card token: {token!r}")
        try:
            suit = Suit(suit_char)
        except ValueError:
            raise ValueError(f"invalid suit in card token: {token!r}") from None
        return cls(RANK_CHARS.index(rank_char) + 2, suit)


def cards_from_strings(tokens: Sequence[str]) -> List[Card]:
    return [Card.from_str(token) for token in tokens]


def cards_to_strings(cards: Sequence[Card]) -> List[str]:
    return [str(card) for card in cards]


class HandRank(Enum):
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def display_name(self) -> str:
        return HAND_NAMES[self]


HAND_NAMES = {
    HandRank.HIGH_CARD: 'High Card',
    HandRank.ONE_PAIR: 'Pair',
    HandRank.TWO_PAIR: 'Two Pair',
    HandRank.THREE_OF_A_KIND: 'Three of a Kind',
    HandRank.STRAIGHT: 'Straight',
    HandRank.FLUSH: 'Flush',
    HandRank.FULL_HOUSE: 'Full House',
    HandRank.FOUR_OF_A_KIND: 'Four of a Kind',
    HandRank.STRAIGHT_FLUSH: 'Straight Flush',
    HandRank.ROYAL_FLUSH: 'Royal Flush',
}


@dataclass
class EvaluatedHand:
    """Best five-card hand found for one player"""
    rank: HandRank
    tiebreakers: List[int]
    cards: List[Card]
    description: str = ''

    @property
    def name(self) -> str:
        return self.rank.display_name

    @property
    def strength(self) -> Tuple[int, List[int]]:
        return self.rank.value, self.tiebreakers

    def __str__(self):
        return f"{self.name} [{' '.join(str(c) for c in self.cards)}]"


class HandEvaluator:
    @staticmethod
    def _evaluate_5_cards(cards: Sequence[Card]) -> Tuple[HandRank, List[int]]:
        """Evaluate exactly 5 cards"""
        ranks = [card.rank for card in cards]
        suits = [card.suit for card in cards]

        rank_counts = Counter(ranks)
        suit_counts = Counter(suits)

        is_flush = len(suit_counts) == 1

        sorted_ranks = sorted(set(ranks))
        is_straight = False
        straight_high = 0

        if len(sorted_ranks) == 5 and sorted_ranks[-1] - sorted_ranks[0] == 4:
            is_straight = True
            straight_high = sorted_ranks[-1]
        # Ace-low straight (A,2,3,4,5)
        elif sorted_ranks == [2, 3, 4, 5, 14]:
            is_straight = True
            straight_high = 5

        count_values = sorted(rank_counts.values(), reverse=True)

        if is_straight and is_flush:
            if straight_high == 14:
                return HandRank.ROYAL_FLUSH, [straight_high]
            return HandRank.STRAIGHT_FLUSH, [straight_high]

        if count_values == [4, 1]:
            quad_rank = max([rank for rank, count in rank_counts.items() if count == 4])
            kicker = max([rank for rank, count in rank_counts.items() if count == 1])
            return HandRank.FOUR_OF_A_KIND, [quad_rank, kicker]

        if count_values == [3, 2]:
            trips_rank = max([rank for rank, count in rank_counts.items() if count == 3])
            pair_rank = max([rank for rank, count in rank_counts.items() if count == 2])
            return HandRank.FULL_HOUSE, [trips_rank, pair_rank]

        if is_flush:
            return HandRank.FLUSH, sorted(ranks, reverse=True)

        if is_straight:
            return HandRank.STRAIGHT, [straight_high]

        if count_values == [3, 1, 1]:
            trips_rank = max([rank for rank, count in rank_counts.items() if count == 3])
            kickers = sorted([rank for rank, count in rank_counts.items() if count == 1], reverse=True)
            return HandRank.THREE_OF_A_KIND, [trips_rank] + kickers

        if count_values == [2, 2, 1]:
            pairs = sorted([rank for rank, count in rank_counts.items() if count == 2], reverse=True)
            kicker = max([rank for rank, count in rank_counts.items() if count == 1])
            return HandRank.TWO_PAIR, pairs + [kicker]

        if count_values == [2, 1, 1, 1]:
            pair_rank = max([rank for rank, count in rank_counts.items() if count == 2])
            kickers = sorted([rank for rank, count in rank_counts.items() if count == 1], reverse=True)
            return HandRank.ONE_PAIR, [pair_rank] + kickers

        return HandRank.HIGH_CARD, sorted(ranks, reverse=True)

    @staticmethod
    def _best_combination(cards: Sequence[Card]) -> Tuple[HandRank, List[int], List[Card]]:
        """
        Scan every 5-card combination and keep the strongest.
        Ties keep the earliest combination, so with cards ordered board-first
        a hand the board makes on its own comes back as the board itself.
        """
        best_rank = None
        best_tiebreakers = []
        best_five = []

        for combo in itertools.combinations(cards, 5):
            rank, tiebreakers = HandEvaluator._evaluate_5_cards(combo)
            if best_rank is None or rank.value > best_rank.value or (
                    rank == best_rank and tiebreakers > best_tiebreakers):
                best_rank = rank
                best_tiebreakers = tiebreakers
                best_five = list(combo)

        return best_rank, best_tiebreakers, best_five

    @staticmethod
    def solve(cards: Sequence[Card]) -> EvaluatedHand:
        """Best 5-card hand out of 5 to 7 cards"""
        if not 5 <= len(cards) <= 7:
            raise ValueError(f"Hand solving requires 5 to 7 cards, got {len(cards)}")

        rank, tiebreakers, best_five = HandEvaluator._best_combination(cards)
        best_five.sort(key=lambda c: c.rank, reverse=True)
        return EvaluatedHand(rank, tiebreakers, best_five, describe_hand(rank, tiebreakers))

    @staticmethod
    def winners(hands: Sequence[EvaluatedHand]) -> List[EvaluatedHand]:
        """All hands sharing the best strength; more than one means a tie"""
        if not hands:
            return []
        best = max(hand.strength for hand in hands)
        return [hand for hand in hands if hand.strength == best]


def describe_hand(rank: HandRank, tiebreakers: Sequence[int]) -> str:
    """
    Short readable form of an evaluated hand, used in log lines:
    'Straight, 9 high', 'Full House, Ks full of Qs', 'Pair of As, K Q J kickers'
    """
    chars = [RANK_CHARS[value - 2] for value in tiebreakers]
    top, rest = chars[0], chars[1:]

    if rank == HandRank.ROYAL_FLUSH:
        return rank.display_name
    if rank in (HandRank.STRAIGHT_FLUSH, HandRank.STRAIGHT):
        return f"{rank.display_name}, {top} high"
    if rank == HandRank.FOUR_OF_A_KIND:
        return f"Four {top}s, {rest[0]} kicker"
    if rank == HandRank.FULL_HOUSE:
        return f"Full House, {top}s full of {rest[0]}s"
    if rank == HandRank.THREE_OF_A_KIND:
        return f"Three {top}s, {' '.join(rest)} kickers"
    if rank == HandRank.TWO_PAIR:
        return f"Two Pair, {top}s and {rest[0]}s, {rest[1]} kicker"
    if rank == HandRank.ONE_PAIR:
        return f"Pair of {top}s, {' '.join(rest)} kickers"
    # flush and high card list all five cards
    return f"{rank.display_name}: {' '.join(chars)}"


@dataclass
class Deck:
    """52-card deck shuffled with a numpy generator"""
    rng: Optional[np.random.Generator] = None
    cards: List[Card] = field(default_factory=list)

    def __post_init__(self):
        if self.rng is None:
            self.rng = np.random.default_rng()
        self.reset()

    def reset(self):
        self.cards = [Card(rank, suit) for suit in Suit for rank in range(2, 15)]
        self.shuffle()

    def shuffle(self):
        order = self.rng.permutation(len(self.cards))
        self.cards = [self.cards[i] for i in order]

    def deal(self, n: int = 1) -> List[Card]:
        if n > len(self.cards):
            raise ValueError(f"Cannot deal {n} cards from a deck of {len(self.cards)}")
        dealt = self.cards[:n]
        self.cards = self.cards[n:]
        return dealt
