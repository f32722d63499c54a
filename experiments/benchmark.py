"""Slow-versus-optimized timing harness for the text analysis engine."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import numpy as np
from tqdm import tqdm

from experiments.baseline import analyze_text_slow
from src.analysis.config import AnalysisConfig
from src.analysis.engine import AnalysisEngine
from src.analysis.records import AnalysisResult

logger = logging.getLogger(__name__)

# (minimum speedup, label), checked top to bottom.
SPEEDUP_TIERS: Tuple[Tuple[float, str], ...] = (
    (100.0, "ninja"),
    (50.0, "excellent"),
    (10.0, "good"),
)


@dataclass(frozen=True)
class TimingSummary:
    """Wall-clock statistics for repeated runs of one analyzer, in milliseconds."""

    label: str
    runs_ms: Tuple[float, ...]

    @property
    def mean_ms(self) -> float:
        return float(np.mean(self.runs_ms)) if self.runs_ms else 0.0

    @property
    def median_ms(self) -> float:
        return float(np.median(self.runs_ms)) if self.runs_ms else 0.0

    @property
    def best_ms(self) -> float:
        return float(np.min(self.runs_ms)) if self.runs_ms else 0.0


@dataclass(frozen=True)
class BenchmarkReport:
    """Outcome of timing both analyzers on the same text."""

    text_length: int
    slow: TimingSummary
    fast: TimingSummary
    result: AnalysisResult

    @property
    def speedup(self) -> Optional[float]:
        """Median slow time over median fast time, or None when too fast to measure."""
        if self.fast.median_ms <= 0.0:
            return None
        return self.slow.median_ms / self.fast.median_ms

    @property
    def status(self) -> str:
        speedup = self.speedup
        if speedup is None:
            return "too fast to measure"
        return speedup_status(speedup)


def speedup_status(speedup: float) -> str:
    for threshold, label in SPEEDUP_TIERS:
        if speedup >= threshold:
            return label
    return "getting there"


def time_call(fn: Callable[[str], AnalysisResult], text: str) -> Tuple[AnalysisResult, float]:
    """Run ``fn(text)`` once and return its result with the elapsed milliseconds."""
    start = time.perf_counter()
    result = fn(text)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return result, elapsed_ms


def run_benchmark(
    text: str,
    repeats: int = 3,
    config: Optional[AnalysisConfig] = None,
    progress: bool = True,
) -> BenchmarkReport:
    """
    Time the naive baseline and the single-pass engine on ``text``.

    Both analyzers must agree on every run; a mismatch raises ``RuntimeError``.
    """
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, received {repeats}.")

    cfg = config or AnalysisConfig()
    engine = AnalysisEngine(cfg)
    analyzers: List[Tuple[str, Callable[[str], AnalysisResult]]] = [
        ("slow", lambda payload: analyze_text_slow(payload, cfg)),
        ("fast", engine.analyze),
    ]

    timings: dict[str, List[float]] = {label: [] for label, _ in analyzers}
    reference: Optional[AnalysisResult] = None
    for _ in tqdm(range(repeats), desc="Benchmark", leave=False, disable=not progress):
        for label, analyzer in analyzers:
            result, elapsed_ms = time_call(analyzer, text)
            timings[label].append(elapsed_ms)
            if reference is None:
                reference = result
            elif result != reference:
                raise RuntimeError(f"The {label} analyzer disagrees with the reference result.")
            logger.debug("%s run took %.3f ms", label, elapsed_ms)

    if reference is None:
        raise RuntimeError("Benchmark finished without producing a result.")
    return BenchmarkReport(
        text_length=len(text),
        slow=TimingSummary("slow", tuple(timings["slow"])),
        fast=TimingSummary("fast", tuple(timings["fast"])),
        result=reference,
    )


__all__ = [
    "BenchmarkReport",
    "SPEEDUP_TIERS",
    "TimingSummary",
    "run_benchmark",
    "speedup_status",
    "time_call",
]
