"""Tests for sample generation and text loading."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.analysis import analyze_text
from src.corpus import DEFAULT_VOCABULARY, generate_sample_text, load_text, write_text


def test_cyclic_sample_repeats_vocabulary_in_order() -> None:
    text = generate_sample_text(12)
    words = text.split(" ")

    assert len(words) == 12
    assert words[:10] == list(DEFAULT_VOCABULARY)
    assert words[10:] == ["rust", "performance"]


def test_cyclic_sample_analysis() -> None:
    result = analyze_text(generate_sample_text(50))

    assert result.unique_words == 10
    assert all(count == 5 for _, count in result.top_words)
    assert result.longest_words == ("optimization", "performance", "efficiency", "algorithm", "benchmark")


def test_seeded_sample_is_reproducible() -> None:
    first = generate_sample_text(200, seed=7)
    second = generate_sample_text(200, seed=7)

    assert first == second
    assert set(first.split()) <= set(DEFAULT_VOCABULARY)
    assert len(first.split()) == 200


def test_custom_vocabulary_and_empty_sample() -> None:
    assert generate_sample_text(3, vocabulary=["x", "y"]) == "x y x"
    assert generate_sample_text(0) == ""


def test_sample_validation() -> None:
    with pytest.raises(ValueError):
        generate_sample_text(-1)
    with pytest.raises(ValueError):
        generate_sample_text(5, vocabulary=[])


def test_write_then_load_text(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "sample.txt"
    write_text(target, "Hello world")

    assert load_text(target) == "Hello world"


def test_load_text_skips_undecodable_bytes(tmp_path: Path) -> None:
    target = tmp_path / "broken.txt"
    target.write_bytes(b"caf\xff bar")

    assert load_text(target) == "caf bar"


def test_load_text_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_text(tmp_path / "absent.txt")
