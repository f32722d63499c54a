"""Tests for shard splitting and sharded analysis."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.analysis import AnalysisConfig, analyze_text
from src.corpus import generate_sample_text
from src.pipelines import analyze_sharded, count_shard, merge_partials, split_shards

TEXT = "The quick brown fox jumps over the lazy dog.\nThe dog sleeps; the FOX runs!\n" * 7


# ---------------------------------------------------------------------------
# Shard splitting


@pytest.mark.parametrize("shards", [1, 2, 3, 8, 500])
def test_split_shards_preserves_text_and_tokens(shards: int) -> None:
    pieces = split_shards(TEXT, shards)

    assert "".join(pieces) == TEXT
    assert 1 <= len(pieces) <= shards
    assert [token for piece in pieces for token in piece.split()] == TEXT.split()


def test_split_shards_cuts_on_whitespace() -> None:
    pieces = split_shards("alpha beta gamma delta", 2)
    for piece in pieces[1:]:
        assert piece[0].isspace()


def test_split_shards_keeps_long_token_whole() -> None:
    assert split_shards("x" * 50, 10) == ["x" * 50]


def test_split_shards_empty_text() -> None:
    assert split_shards("", 4) == []


def test_split_shards_rejects_bad_count() -> None:
    with pytest.raises(ValueError):
        split_shards(TEXT, 0)


# ---------------------------------------------------------------------------
# Merging


def test_merge_partials_sums_tables_and_letters() -> None:
    table, letters = merge_partials([count_shard("aa bb"), count_shard(" aa 12 cc")])

    assert table.as_dict() == {"aa": 2, "bb": 1, "cc": 1}
    assert letters == 8


# ---------------------------------------------------------------------------
# Sharded analysis


@pytest.mark.parametrize("shards", [1, 2, 5, 40])
def test_sharded_analysis_matches_single_pass(shards: int) -> None:
    assert analyze_sharded(TEXT, shards) == analyze_text(TEXT)


def test_sharded_analysis_with_process_pool() -> None:
    text = generate_sample_text(2_000, seed=3)
    config = AnalysisConfig(top_words=4, longest_words=3)

    result = analyze_sharded(text, shards=4, workers=2, config=config)

    assert result == analyze_text(text, config)


def test_sharded_analysis_of_empty_text() -> None:
    result = analyze_sharded("", shards=3)

    assert result.total_alphabetic_chars == 0
    assert result.top_words == ()
    assert result.longest_words == ()


def test_sharded_analysis_rejects_bad_worker_count() -> None:
    with pytest.raises(ValueError):
        analyze_sharded(TEXT, shards=2, workers=0)
