"""Synthetic benchmark text."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

DEFAULT_VOCABULARY = (
    "rust",
    "performance",
    "optimization",
    "memory",
    "speed",
    "efficiency",
    "benchmark",
    "algorithm",
    "data",
    "structure",
)
DEFAULT_SAMPLE_SIZE = 50_000


def generate_sample_text(
    size: int,
    vocabulary: Sequence[str] = DEFAULT_VOCABULARY,
    seed: Optional[int] = None,
) -> str:
    """
    Build a space-separated text of ``size`` words drawn from ``vocabulary``.

    Without a seed the vocabulary is cycled in order, which gives every word the
    same count (up to one). With a seed, words are sampled uniformly using a
    NumPy generator so the output is reproducible per seed.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, received {size}.")
    if not vocabulary:
        raise ValueError("vocabulary must contain at least one word.")

    if seed is None:
        return " ".join(vocabulary[i % len(vocabulary)] for i in range(size))

    rng = np.random.default_rng(seed)
    picks = rng.integers(0, len(vocabulary), size=size)
    return " ".join(vocabulary[int(i)] for i in picks)


__all__ = ["DEFAULT_SAMPLE_SIZE", "DEFAULT_VOCABULARY", "generate_sample_text"]
