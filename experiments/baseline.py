"""Naive multi-pass analyzer used as the slow reference in benchmarks.

It walks the text four times, copies every word it touches, finds the most
frequent words with a nested linear search and ranks lengths with a full sort.
Normalization and tie-breaking match ``src.analysis`` so both produce the same
``AnalysisResult``; only the cost differs.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from src.analysis.config import AnalysisConfig
from src.analysis.records import AnalysisResult

_ASCII_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _clean(token: str) -> str:
    cleaned = ""
    # Filter before lowercasing: str.lower() maps some non-ASCII letters onto ASCII ones.
    for char in token:
        if char in _ASCII_LETTERS:
            cleaned += char
    return cleaned.lower()


def _ranks_before(word: str, count: int, best_word: str, best_count: int) -> bool:
    if count != best_count:
        return count > best_count
    return word < best_word


def analyze_text_slow(text: str, config: Optional[AnalysisConfig] = None) -> AnalysisResult:
    """Brute-force equivalent of ``AnalysisEngine.analyze``."""
    cfg = config or AnalysisConfig()
    cfg.validate()

    # Pass 1: word frequencies.
    word_freq: Dict[str, int] = {}
    for line in text.splitlines():
        for token in line.split():
            clean_word = _clean(token)
            if clean_word:
                key = str(clean_word)
                word_freq[key] = word_freq.get(key, 0) + 1

    # Pass 2: repeated linear scans, skipping words already selected.
    top_words: List[Tuple[str, int]] = []
    for _ in range(cfg.top_words):
        best_word = ""
        best_count = 0
        for word, count in word_freq.items():
            already_selected = False
            for existing_word, _ in top_words:
                if existing_word == word:
                    already_selected = True
                    break
            if not already_selected and _ranks_before(word, count, best_word, best_count):
                best_word = str(word)
                best_count = count
        if best_count > 0:
            top_words.append((best_word, best_count))

    # Pass 3: alphabetic characters.
    char_count = 0
    for line in text.splitlines():
        for char in line:
            if char in _ASCII_LETTERS:
                char_count += 1

    # Pass 4: every occurrence, sorted by length, then de-duplicated.
    all_words: List[str] = []
    for line in text.splitlines():
        for token in line.split():
            clean_word = _clean(token)
            if clean_word:
                all_words.append(clean_word)
    all_words.sort(key=lambda word: (-len(word), word))

    longest_words: List[str] = []
    for word in all_words:
        if len(longest_words) >= cfg.longest_words:
            break
        if word not in longest_words:
            longest_words.append(str(word))

    return AnalysisResult(
        total_alphabetic_chars=char_count,
        top_words=tuple(top_words),
        longest_words=tuple(longest_words),
        unique_words=len(word_freq),
    )


__all__ = ["analyze_text_slow"]
