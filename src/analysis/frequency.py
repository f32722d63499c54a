"""Word occurrence table populated during the single analysis pass."""

from __future__ import annotations

from typing import Dict, ItemsView, Iterator, KeysView


class FrequencyTable:
    """Mapping from canonical word to occurrence count.

    Each distinct word is stored once, as the key object handed to the first
    ``observe`` call; later observations of an equal word only touch the count.
    """

    def __init__(self) -> None:
        self._counts: Dict[str, int] = {}

    def observe(self, word: str) -> int:
        """Count one occurrence of ``word`` and return its updated count."""
        if not word:
            raise ValueError("Cannot observe an empty word.")
        count = self._counts.get(word, 0) + 1
        self._counts[word] = count
        return count

    def merge(self, other: "FrequencyTable") -> None:
        """Fold the counts of ``other`` into this table."""
        counts = self._counts
        for word, count in other.items():
            counts[word] = counts.get(word, 0) + count

    def count(self, word: str) -> int:
        return self._counts.get(word, 0)

    def items(self) -> ItemsView[str, int]:
        """Read-only view over ``(word, count)`` pairs."""
        return self._counts.items()

    def words(self) -> KeysView[str]:
        return self._counts.keys()

    def total(self) -> int:
        """Number of observed (non-empty) tokens."""
        return sum(self._counts.values())

    def as_dict(self) -> Dict[str, int]:
        return dict(self._counts)

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"FrequencyTable(distinct={len(self._counts)}, total={self.total()})"


__all__ = ["FrequencyTable"]
