"""Edit-distance suggestions for titles that were not found.

Every stored title is scored against the query, so the cost is
O(N * M) for N titles of average length M. This is the slowest operation the
catalog offers; it only runs after an exact lookup has already failed.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from rapidfuzz.distance import Levenshtein

if TYPE_CHECKING:
    from collections.abc import Iterable


class Suggestion(NamedTuple):
    """A stored title and its Levenshtein distance from the query."""

    title: str
    distance: int


@dataclass(frozen=True, slots=True)
class _Worst:
    """Heap entry ordered so the worst retained suggestion sits at the top."""

    suggestion: Suggestion

    def __lt__(self, other: _Worst) -> bool:
        return _rank(self.suggestion) > _rank(other.suggestion)


def _rank(suggestion: Suggestion) -> tuple[int, str]:
    return suggestion.distance, suggestion.title


class Shortlist:
    """Keeps the ``capacity`` best suggestions seen so far.

    Entries are ranked by distance, then title. Once full, a candidate is
    admitted only if it ranks strictly better than the worst entry held, which
    it then evicts.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._heap: list[_Worst] = []

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, suggestion: Suggestion) -> bool:
        """Offer a candidate; return whether it was retained."""
        if self.capacity == 0:
            return False
        entry = _Worst(suggestion)
        if len(self._heap) < self.capacity:
            heapq.heappush(self._heap, entry)
            return True
        if _rank(suggestion) < _rank(self._heap[0].suggestion):
            heapq.heapreplace(self._heap, entry)
            return True
        return False

    def extend(self, suggestions: Iterable[Suggestion]) -> None:
        for suggestion in suggestions:
            self.push(suggestion)

    def drain(self) -> list[Suggestion]:
        """Empty the shortlist, returning its entries closest first."""
        worst_first = [heapq.heappop(self._heap).suggestion for _ in range(len(self._heap))]
        worst_first.reverse()
        return worst_first


def rank_suggestions(query: str, titles: Iterable[str], limit: int) -> list[Suggestion]:
    """Return up to ``limit`` of ``titles`` closest to ``query``, closest first.

    Ties on distance are broken by title so the output is deterministic.
    """

    shortlist = Shortlist(limit)
    if limit == 0:
        return []
    shortlist.extend(Suggestion(title, Levenshtein.distance(query, title)) for title in titles)
    return shortlist.drain()
