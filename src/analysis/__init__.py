"""Single-pass word statistics: normalization, counting and bounded top-K ranking."""

from .config import DEFAULT_LONGEST_WORDS, DEFAULT_TOP_WORDS, AnalysisConfig
from .engine import AnalysisEngine, analyze_text
from .frequency import FrequencyTable
from .normalizer import Normalizer, canonicalize
from .records import AnalysisResult
from .topk import BoundedTopK, Lexical, select_longest, select_most_frequent

__all__ = [
    "DEFAULT_LONGEST_WORDS",
    "DEFAULT_TOP_WORDS",
    "AnalysisConfig",
    "AnalysisEngine",
    "AnalysisResult",
    "BoundedTopK",
    "FrequencyTable",
    "Lexical",
    "Normalizer",
    "analyze_text",
    "canonicalize",
    "select_longest",
    "select_most_frequent",
]
