"""
Top-K selection over scored words.

Every accepted word is pushed first; only the final drain is bounded. This is
an eager batch top-K (no eviction on insert), which keeps the order identical
to a full sort of all candidates.
"""

from __future__ import annotations

import heapq
from typing import Iterator, List

from .scoring import WordScore


class _MaxFirst:
    """Heap entry that inverts WordScore order so heapq (a min-heap) pops the max."""

    __slots__ = ("ws",)

    def __init__(self, ws: WordScore):
        self.ws = ws

    def __lt__(self, other: "_MaxFirst") -> bool:
        return other.ws < self.ws


class RankedSelector:
    def __init__(self):
        self._heap: List[_MaxFirst] = []

    def push(self, ws: WordScore) -> None:
        heapq.heappush(self._heap, _MaxFirst(ws))

    def __len__(self) -> int:
        return len(self._heap)

    def drain(self, k: int) -> Iterator[WordScore]:
        """
        Pop and yield min(k, len(self)) entries, best first.

        k == 0 yields nothing; entries not popped stay in the selector.
        """
        if k < 0:
            raise ValueError(f"k must be non-negative; got {k}")

        remaining = k
        while self._heap and remaining > 0:
            remaining -= 1
            yield heapq.heappop(self._heap).ws
