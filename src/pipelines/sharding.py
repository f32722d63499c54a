"""Shard-parallel counting with a sequential merge before ranking."""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from tqdm import tqdm

from src.analysis.config import AnalysisConfig
from src.analysis.engine import AnalysisEngine
from src.analysis.frequency import FrequencyTable
from src.analysis.records import AnalysisResult

logger = logging.getLogger(__name__)

PartialCount = Tuple[FrequencyTable, int]


def split_shards(text: str, shards: int) -> List[str]:
    """
    Cut ``text`` into at most ``shards`` contiguous pieces.

    Every cut is moved forward onto a whitespace character, so no token is
    split across two pieces and concatenating the pieces restores ``text``.
    """
    if shards < 1:
        raise ValueError(f"shards must be at least 1, received {shards}.")

    length = len(text)
    step = max(1, -(-length // shards))
    pieces: List[str] = []
    start = 0
    while start < length:
        end = min(start + step, length)
        while end < length and not text[end].isspace():
            end += 1
        pieces.append(text[start:end])
        start = end
    return pieces


def count_shard(shard: str) -> PartialCount:
    """Count one shard; module-level so process pools can pickle it."""
    return AnalysisEngine().count(shard)


def _count_pieces(pieces: Sequence[str], workers: Optional[int]) -> Iterator[PartialCount]:
    if workers is not None and workers > 1 and len(pieces) > 1:
        with ProcessPoolExecutor(max_workers=workers) as pool:
            # map() yields in submission order, keeping the merge deterministic.
            yield from pool.map(count_shard, pieces)
    else:
        yield from map(count_shard, pieces)


def merge_partials(partials: Iterable[PartialCount]) -> PartialCount:
    """Combine per-shard tables and letter totals into one."""
    merged = FrequencyTable()
    letters = 0
    for table, shard_letters in partials:
        merged.merge(table)
        letters += shard_letters
    return merged, letters


def analyze_sharded(
    text: str,
    shards: int,
    workers: Optional[int] = None,
    config: Optional[AnalysisConfig] = None,
    progress: bool = False,
) -> AnalysisResult:
    """Analyze ``text`` shard by shard; the result matches a single-pass analysis."""
    if workers is not None and workers < 1:
        raise ValueError(f"workers must be at least 1, received {workers}.")

    engine = AnalysisEngine(config)
    pieces = split_shards(text, shards)
    logger.debug("Split %d characters into %d shard(s) for %s worker(s).", len(text), len(pieces), workers or 1)

    counted = tqdm(
        _count_pieces(pieces, workers),
        total=len(pieces),
        desc="Counting shards",
        leave=False,
        disable=not progress,
    )
    table, letters = merge_partials(counted)
    logger.debug("Merged shards into %d distinct words.", len(table))
    return engine.summarize(table, letters)


__all__ = [
    "PartialCount",
    "analyze_sharded",
    "count_shard",
    "merge_partials",
    "split_shards",
]
