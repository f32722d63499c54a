"""Shared data records for text analysis results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analysis run."""

    total_alphabetic_chars: int
    top_words: Tuple[Tuple[str, int], ...]
    longest_words: Tuple[str, ...]
    unique_words: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping with list sequences, ready for JSON serialisation."""
        return {
            "total_alphabetic_chars": self.total_alphabetic_chars,
            "unique_words": self.unique_words,
            "top_words": [[word, occurrences] for word, occurrences in self.top_words],
            "longest_words": list(self.longest_words),
        }


__all__ = ["AnalysisResult"]
