"""Bounded top-K selection backed by a size-capped min-heap."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Generic, List, Tuple, TypeVar

from .config import DEFAULT_LONGEST_WORDS, DEFAULT_TOP_WORDS
from .frequency import FrequencyTable

KeyT = TypeVar("KeyT")
PayloadT = TypeVar("PayloadT")

RankKey = Tuple[int, "Lexical"]


@dataclass(frozen=True)
class Lexical:
    """Wraps a word so that lexicographically smaller words rank higher.

    Paired with a primary key as ``(primary, Lexical(word))`` this gives a total
    order over distinct words, which keeps selector output deterministic.
    """

    word: str

    def __lt__(self, other: "Lexical") -> bool:
        return self.word > other.word

    def __gt__(self, other: "Lexical") -> bool:
        return self.word < other.word


class BoundedTopK(Generic[KeyT, PayloadT]):
    """Retain the ``capacity`` largest keys offered so far.

    The smallest retained entry sits at the heap root, so each offer costs at
    most one O(log k) push or replace and ``n`` offers cost O(n log k).
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, received {capacity}.")
        self._capacity = capacity
        self._heap: List[Tuple[KeyT, int, PayloadT]] = []
        # Insertion sequence; equal keys never fall through to payload comparison.
        self._sequence = count()
        self._drained = False

    def offer(self, key: KeyT, payload: PayloadT) -> bool:
        """Offer an entry and report whether it is currently retained."""
        if self._drained:
            raise RuntimeError("BoundedTopK.offer() called after drain_descending().")
        heap = self._heap
        if len(heap) < self._capacity:
            heapq.heappush(heap, (key, next(self._sequence), payload))
            return True
        if not heap or not heap[0][0] < key:  # type: ignore[operator]
            return False
        heapq.heapreplace(heap, (key, next(self._sequence), payload))
        return True

    def drain_descending(self) -> List[Tuple[KeyT, PayloadT]]:
        """Consume the selector, returning ``(key, payload)`` pairs largest first."""
        if self._drained:
            raise RuntimeError("BoundedTopK.drain_descending() may only be called once.")
        self._drained = True
        heap = self._heap
        ascending: List[Tuple[KeyT, PayloadT]] = []
        while heap:
            key, _, payload = heapq.heappop(heap)
            ascending.append((key, payload))
        ascending.reverse()
        return ascending

    def __len__(self) -> int:
        return len(self._heap)


def frequency_key(word: str, occurrences: int) -> RankKey:
    return (occurrences, Lexical(word))


def length_key(word: str) -> RankKey:
    return (len(word), Lexical(word))


def select_most_frequent(table: FrequencyTable, capacity: int = DEFAULT_TOP_WORDS) -> List[Tuple[str, int]]:
    """Top ``capacity`` words by count, ties broken alphabetically."""
    selector: BoundedTopK[RankKey, str] = BoundedTopK(capacity)
    for word, occurrences in table.items():
        selector.offer(frequency_key(word, occurrences), word)
    return [(word, key[0]) for key, word in selector.drain_descending()]


def select_longest(table: FrequencyTable, capacity: int = DEFAULT_LONGEST_WORDS) -> List[str]:
    """Top ``capacity`` distinct words by length, ties broken alphabetically."""
    selector: BoundedTopK[RankKey, str] = BoundedTopK(capacity)
    for word, _ in table.items():
        selector.offer(length_key(word), word)
    return [word for _, word in selector.drain_descending()]


__all__ = [
    "BoundedTopK",
    "Lexical",
    "RankKey",
    "frequency_key",
    "length_key",
    "select_longest",
    "select_most_frequent",
]
