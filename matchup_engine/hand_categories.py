"""
hand_categories.py

Regenerates the hand-categories manifest: every observed category key in
poker-strength order, the number of stored deals per key and the totals.
The manifest is written as a TypeScript module for the front end.
"""
import json
import os
from typing import Dict, Iterable, List, Tuple

from .category_keys import CategoryKeyError, HandType, base_token, parse_key
from .matchup_store import MatchupStore

from .logging_config import get_logger
logger = get_logger(__name__)

UNKNOWN_STRENGTH = len(HandType)


def _strength(token: str) -> int:
    hand_type = HandType.from_token(token)
    return hand_type.strength if hand_type is not None else UNKNOWN_STRENGTH


def category_sort_key(key: str) -> Tuple:
    """
    Keys with a separator sort by (winner strength, loser strength), weak to strong;
    keys without one ('onBoard...Chop') go last.
    """
    try:
        left, right = parse_key(key)
    except CategoryKeyError:
        return (1, 0, 0, key)
    return (0, _strength(left), _strength(base_token(right)), key)


def sort_categories(keys: Iterable[str]) -> List[str]:
    return sorted(keys, key=category_sort_key)


def build_manifest(store: MatchupStore) -> Dict:
    counts = store.counts()
    categories = sort_categories(counts)
    return {
        'categories': categories,
        'counts': {key: counts[key] for key in categories},
        'total_categories': len(categories),
        'total_hands': store.total_deals(),
    }


def render_manifest(manifest: Dict) -> str:
    return (
        "// AUTO-GENERATED. Do not edit manually.\n"
        "// Sorted by (left, right) poker strength: weak -> strong.\n\n"
        f"export const HAND_CATEGORIES = {json.dumps(manifest['categories'], indent=2)} as const;\n"
        "export type HandCategory = typeof HAND_CATEGORIES[number];\n\n"
        "export const HAND_CATEGORY_COUNTS: Record<HandCategory, number> = "
        f"{json.dumps(manifest['counts'], indent=2)};\n\n"
        f"export const TOTAL_CATEGORIES = {manifest['total_categories']};\n"
        f"export const TOTAL_HANDS = {manifest['total_hands']};\n"
    )


def write_manifest(store: MatchupStore, path: str) -> Dict:
    manifest = build_manifest(store)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(render_manifest(manifest))
    logger.info(f"Wrote {manifest['total_categories']} categories to {path}")
    return manifest
