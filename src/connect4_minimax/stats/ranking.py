from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class RankingEntry:
    name: str
    score: int = 0


def merge_sort(items: List[RankingEntry]) -> List[RankingEntry]:
    """Stable descending sort by score; equal scores keep their order."""
    if len(items) <= 1:
        return list(items)

    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _merge(left: List[RankingEntry], right: List[RankingEntry]) -> List[RankingEntry]:
    out: List[RankingEntry] = []
    i = j = 0

    while i < len(left) and j < len(right):
        if left[i].score >= right[j].score:
            out.append(left[i])
            i += 1
        else:
            out.append(right[j])
            j += 1

    out.extend(left[i:])
    out.extend(right[j:])
    return out


class Ranking:
    """
    Small leaderboard kept sorted by descending score.

    New entries go in front of existing entries with the same score, and
    every score change re-sorts the whole list with a stable merge sort, so
    among ties the most recently inserted name comes first.
    """

    def __init__(self, names: Optional[List[str]] = None) -> None:
        self.items: List[RankingEntry] = []
        for name in names or []:
            self.insert(RankingEntry(name))

    def __len__(self) -> int:
        return len(self.items)

    def _insert_position(self, entry: RankingEntry) -> int:
        lo, hi = 0, len(self.items)
        while lo < hi:
            mid = (lo + hi) // 2
            if self.items[mid].score > entry.score:
                lo = mid + 1
            else:
                hi = mid
        return lo

    def insert(self, entry: RankingEntry) -> None:
        self.items.insert(self._insert_position(entry), entry)

    def find(self, name: str) -> Optional[RankingEntry]:
        for entry in self.items:
            if entry.name == name:
                return entry
        return None

    def score_of(self, name: str) -> int:
        entry = self.find(name)
        return entry.score if entry else 0

    def update(self, name: str, score: int) -> None:
        entry = self.find(name)
        if entry is None:
            self.insert(RankingEntry(name, score))
            return
        entry.score = score
        self.items = merge_sort(self.items)

    def award(self, name: str, points: int) -> None:
        """Add `points` to `name` (registering it first if needed) and re-sort."""
        entry = self.find(name)
        if entry is None:
            entry = RankingEntry(name)
            self.insert(entry)
        entry.score += points
        self.items = merge_sort(self.items)

    def top(self, n: int = 5) -> List[RankingEntry]:
        return self.items[:n]
