"""Single-pass text analysis: counting followed by two bounded top-K reductions."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .config import AnalysisConfig
from .frequency import FrequencyTable
from .normalizer import Normalizer
from .records import AnalysisResult
from .topk import BoundedTopK, RankKey, frequency_key, length_key

logger = logging.getLogger(__name__)


class AnalysisEngine:
    """Tokenize, normalize and count a text buffer, then rank its words."""

    def __init__(self, config: Optional[AnalysisConfig] = None) -> None:
        self.config = config or AnalysisConfig()
        self.config.validate()

    def analyze(self, text: str) -> AnalysisResult:
        """Return letter count, most frequent words and longest words of ``text``."""
        table, letters = self.count(text)
        return self.summarize(table, letters)

    def count(self, text: str) -> Tuple[FrequencyTable, int]:
        """Run the traversal, returning the populated table and the letter total."""
        normalize = Normalizer()
        table = FrequencyTable()
        observe = table.observe
        for token in text.split():
            word = normalize(token)
            if word:
                observe(word)
        logger.debug(
            "Counted %d letters across %d distinct words (%d chars of input).",
            normalize.letters,
            len(table),
            len(text),
        )
        return table, normalize.letters

    def summarize(self, table: FrequencyTable, letters: int) -> AnalysisResult:
        """Feed every table entry through both selectors and assemble the result."""
        by_count: BoundedTopK[RankKey, str] = BoundedTopK(self.config.top_words)
        by_length: BoundedTopK[RankKey, str] = BoundedTopK(self.config.longest_words)
        for word, occurrences in table.items():
            by_count.offer(frequency_key(word, occurrences), word)
            by_length.offer(length_key(word), word)

        top_words: List[Tuple[str, int]] = [(word, key[0]) for key, word in by_count.drain_descending()]
        longest_words = [word for _, word in by_length.drain_descending()]
        return AnalysisResult(
            total_alphabetic_chars=letters,
            top_words=tuple(top_words),
            longest_words=tuple(longest_words),
            unique_words=len(table),
        )


def analyze_text(text: str, config: Optional[AnalysisConfig] = None) -> AnalysisResult:
    """Build an engine and analyze ``text`` in one call."""
    return AnalysisEngine(config).analyze(text)


__all__ = ["AnalysisEngine", "analyze_text"]
