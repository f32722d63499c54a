"""Static configuration for the text analysis engine."""

from __future__ import annotations

from dataclasses import dataclass

# Default selector capacities used by the Typer CLI; callers may override these.
DEFAULT_TOP_WORDS = 10
DEFAULT_LONGEST_WORDS = 5


@dataclass(frozen=True)
class AnalysisConfig:
    """Capacities for the two bounded top-K reductions."""

    top_words: int = DEFAULT_TOP_WORDS
    longest_words: int = DEFAULT_LONGEST_WORDS

    def validate(self) -> None:
        for name, value in (("top_words", self.top_words), ("longest_words", self.longest_words)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, received {value!r}.")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, received {value}.")


__all__ = [
    "DEFAULT_TOP_WORDS",
    "DEFAULT_LONGEST_WORDS",
    "AnalysisConfig",
]
