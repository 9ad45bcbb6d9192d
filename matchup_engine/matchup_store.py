"""
matchup_store.py

Sample deals grouped by category key, capped per category and persisted as JSON
"""
import json
import os
import tempfile
from dataclasses import dataclass, asdict
from typing import Dict, Iterator, List, Optional

from .logging_config import get_logger
logger = get_logger(__name__)

MAX_PER_CATEGORY = 100


@dataclass
class Deal:
    board: List[str]  # 5 cards
    p1: List[str]     # winner's hole cards, or player 1 on a tie
    p2: List[str]

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data) -> Optional['Deal']:
        """Build a deal from persisted JSON; None if the record is malformed"""
        if not isinstance(data, dict):
            return None
        board, p1, p2 = data.get('board'), data.get('p1'), data.get('p2')
        for cards, size in ((board, 5), (p1, 2), (p2, 2)):
            if not isinstance(cards, list) or len(cards) != size:
                return None
            if not all(isinstance(c, str) and len(c) == 2 for c in cards):
                return None
        return cls(board=list(board), p1=list(p1), p2=list(p2))


class MatchupStore:
    """
    Category key -> deals, in insertion order.
    Once a category holds max_per_category deals further ones are dropped;
    the earliest samples are the ones kept.
    """

    def __init__(self, max_per_category: int = MAX_PER_CATEGORY):
        if max_per_category < 1:
            raise ValueError(f"max_per_category must be positive, got {max_per_category}")
        self.max_per_category = max_per_category
        self._matchups: Dict[str, List[Deal]] = {}

    def insert(self, key: str, deal: Deal) -> bool:
        """Append the deal unless its category is full; returns whether it was kept"""
        deals = self._matchups.setdefault(key, [])
        if len(deals) >= self.max_per_category:
            return False
        deals.append(deal)
        return True

    def get(self, key: str) -> List[Deal]:
        return list(self._matchups.get(key, []))

    def keys(self) -> List[str]:
        return list(self._matchups)

    def counts(self) -> Dict[str, int]:
        return {key: len(deals) for key, deals in self._matchups.items()}

    def total_deals(self) -> int:
        return sum(len(deals) for deals in self._matchups.values())

    def __len__(self) -> int:
        return len(self._matchups)

    def __contains__(self, key: str) -> bool:
        return key in self._matchups

    def __iter__(self) -> Iterator[str]:
        return iter(self._matchups)

    def to_dict(self) -> Dict[str, List[dict]]:
        return {key: [d.to_dict() for d in deals] for key, deals in self._matchups.items()}

    @classmethod
    def from_dict(cls, data: dict, max_per_category: int = MAX_PER_CATEGORY) -> 'MatchupStore':
        store = cls(max_per_category)
        for key, records in data.items():
            if not isinstance(records, list):
                logger.warning(f"Skipping category {key!r}: expected a list, got {type(records).__name__}")
                continue
            for record in records:
                deal = Deal.from_dict(record)
                if deal is None:
                    logger.warning(f"Skipping malformed deal in category {key!r}: {record!r}")
                    continue
                store.insert(key, deal)
        return store

    @classmethod
    def load(cls, path: str, max_per_category: int = MAX_PER_CATEGORY) -> 'MatchupStore':
        """
        Read a persisted store. A missing or unreadable-as-JSON file gives an
        empty store; any other I/O error is raised.
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.info(f"No matchup store at {path}; starting empty")
            return cls(max_per_category)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Matchup store at {path} is corrupt ({e}); starting empty")
            return cls(max_per_category)

        if not isinstance(data, dict):
            logger.warning(f"Matchup store at {path} is not a JSON object; starting empty")
            return cls(max_per_category)

        store = cls.from_dict(data, max_per_category)
        logger.info(f"Loaded {store.total_deals()} deals in {len(store)} categories from {path}")
        return store

    def save(self, path: str):
        """
        Write the store as JSON. The data goes to a temporary file next to
        path which then replaces it, so a failed write leaves the old file intact.
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix='.matchups-', suffix='.tmp', dir=directory or '.')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=2)
            os.replace(tmp_path, path)
        except BaseException:
            os.remove(tmp_path)
            raise
        logger.info(f"Saved {self.total_deals()} deals in {len(self)} categories to {path}")
