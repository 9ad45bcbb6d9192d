"""
category_keys.py

Category keys name a showdown outcome as '<winner>Vs<Loser>', e.g. 'fourOfAKindVsFlush'.
Refined same-type keys replace the right side with the deciding factor:
'pairVsLowerPair', 'pairVsPairKickerDecides', 'pairVsPairChop', or 'onBoardPairChop'
when the board alone made both hands.
"""
import re
from enum import Enum
from typing import Optional, Tuple

SEPARATOR = 'Vs'
ON_BOARD_PREFIX = 'onBoard'


class CategoryKeyError(ValueError):
    """Raised when a string is not a '<left>Vs<Right>' category key"""


class HandType(Enum):
    """Canonical hand types, weakest to strongest"""
    HIGH_CARD = ('highCard', 'High Card')
    PAIR = ('pair', 'Pair')
    TWO_PAIR = ('twoPair', 'Two Pair')
    THREE_OF_A_KIND = ('threeOfAKind', 'Three of a Kind')
    STRAIGHT = ('straight', 'Straight')
    FLUSH = ('flush', 'Flush')
    FULL_HOUSE = ('fullHouse', 'Full House')
    FOUR_OF_A_KIND = ('fourOfAKind', 'Four of a Kind')
    STRAIGHT_FLUSH = ('straightFlush', 'Straight Flush')
    ROYAL_FLUSH = ('royalFlush', 'Royal Flush')

    def __init__(self, token: str, display_name: str):
        self.token = token
        self.display_name = display_name

    @property
    def strength(self) -> int:
        return list(HandType).index(self)

    @classmethod
    def from_token(cls, token: str) -> Optional['HandType']:
        for hand_type in cls:
            if hand_type.token == token:
                return hand_type
        return None

    @classmethod
    def from_name(cls, name: str) -> Optional['HandType']:
        return cls.from_token(to_token(name))


class Verdict(Enum):
    """What separated two hands of the same type"""
    LOWER = 'lower'
    KICKER_DECIDES = 'kickerDecides'
    CHOP = 'chop'
    ON_BOARD_CHOP = 'onBoardChop'


def capitalize_first(s: str) -> str:
    return s[:1].upper() + s[1:]


def lower_first(s: str) -> str:
    return s[:1].lower() + s[1:]


def to_token(name: str, capitalize: bool = False) -> str:
    """
    'Four of a Kind' -> 'fourOfAKind' ('FourOfAKind' with capitalize=True)
    """
    words = re.sub(r'[^a-z0-9 ]+', '', name.lower()).split()
    if not words:
        return ''
    first = capitalize_first(words[0]) if capitalize else words[0]
    return first + ''.join(capitalize_first(w) for w in words[1:])


def build_key(left_name: str, right_name: str) -> str:
    return f"{to_token(left_name)}{SEPARATOR}{to_token(right_name, capitalize=True)}"


def parse_key(key: str) -> Tuple[str, str]:
    """Split a key on its first separator; the right token comes back lowerCamel"""
    left, sep, right = key.partition(SEPARATOR)
    if not sep or not left or not right:
        raise CategoryKeyError(f"not a category key: {key!r}")
    return left, lower_first(right)


def category_label(token: str, verdict: Verdict) -> str:
    """Refined key for two hands of the same type"""
    cap = capitalize_first(token)
    if verdict == Verdict.LOWER:
        return f"{token}{SEPARATOR}Lower{cap}"
    if verdict == Verdict.KICKER_DECIDES:
        return f"{token}{SEPARATOR}{cap}KickerDecides"
    if verdict == Verdict.CHOP:
        return f"{token}{SEPARATOR}{cap}Chop"
    return f"{ON_BOARD_PREFIX}{cap}Chop"


_REFINED_RIGHT = re.compile(r'^(?:lower(?P<lower>[A-Z]\w*)|(?P<plain>\w+?)(?:KickerDecides|Chop)?)$')


def base_token(right: str) -> str:
    """
    Strip a refinement off the right side of a parsed key:
    'lowerPair' -> 'pair', 'pairKickerDecides' -> 'pair', 'pairChop' -> 'pair'
    """
    match = _REFINED_RIGHT.match(right)
    if match is None:
        return right
    if match.group('lower'):
        return lower_first(match.group('lower'))
    return match.group('plain')
