"""Unit tests for title_extractor.py."""

from __future__ import annotations

import pytest

from title_extractor import (
    UNKNOWN_TITLE,
    extract_title,
    is_metadata,
    is_valid_title,
    title_score,
)


def test_title_after_page_marker() -> None:
    fragment = "- 1 - 深層学習を用いた画像認識の研究\n本文が続く。"
    assert extract_title(fragment) == "深層学習を用いた画像認識の研究"


def test_title_after_paper_id() -> None:
    fragment = "1A1-GS-10-01 Transformer Models for Dialogue Systems\nbody"
    assert extract_title(fragment) == "Transformer Models for Dialogue Systems"


def test_title_by_position_skips_invalid_lines() -> None:
    fragment = "12\nLearning Robust Policies for Legged Robots\nSecond candidate line here"
    assert extract_title(fragment) == "Learning Robust Policies for Legged Robots"


def test_title_by_position_skips_metadata() -> None:
    fragment = (
        "人工知能学会全国大会論文集 第39回 2025年\n"
        "Graph Neural Networks for Traffic Forecasting\n"
    )
    assert extract_title(fragment) == "Graph Neural Networks for Traffic Forecasting"


def test_title_by_score_beyond_first_ten_lines() -> None:
    lines = ["1"] * 10 + [
        "A Study of Attention Mechanisms in Speech Recognition",
        "ニューラル機械翻訳の評価手法に関する研究",
    ]
    assert extract_title("\n".join(lines)) == "ニューラル機械翻訳の評価手法に関する研究"


def test_lines_after_twentieth_are_ignored() -> None:
    lines = ["x"] * 20 + ["A Perfectly Good Title Far Down The Page"]
    assert extract_title("\n".join(lines)) == UNKNOWN_TITLE


def test_unknown_title_when_nothing_qualifies() -> None:
    assert extract_title("abc\n123") == UNKNOWN_TITLE
    assert extract_title("") == UNKNOWN_TITLE


@pytest.mark.parametrize("fragment", [
    "- 1 - " + "A" * 250,
    "1A1-GS-10-01 " + "B" * 300,
    "short\n" + "タイトル" * 60,
    "- 1 - Ten chars!\nnext",
    "Deep Learning for Robot Navigation",
    "©2025 人工知能学会\nzoom link\nsession 3",
])
def test_title_length_bounds(fragment: str) -> None:
    title = extract_title(fragment)
    assert title == UNKNOWN_TITLE or 10 <= len(title) <= 200


def test_is_valid_title() -> None:
    assert is_valid_title("abcdefghij") is True
    assert is_valid_title("深層学習を用いた研究です") is True
    assert is_valid_title("!!!!!!abcd") is False  # symbol ratio 0.6
    assert is_valid_title("1234567890") is False  # no letters
    assert is_valid_title("short") is False
    assert is_valid_title("x" * 201) is False


@pytest.mark.parametrize("line", [
    "©2025 JSAI",
    "2025年度 人工知能学会全国大会",
    "Zoom meeting room",
    "International Conference on Robots",
    "Session 2A",
    "Abstract of the talk",
    "42",
    "Q",
    "sato@example.jp",
    "https://example.com",
    "Tel: 03-1234-5678",
])
def test_is_metadata(line: str) -> None:
    assert is_metadata(line) is True


def test_regular_title_is_not_metadata() -> None:
    assert is_metadata("Graph Neural Networks for Traffic Forecasting") is False


def test_title_score() -> None:
    # 34 chars: +10 +5, Latin word +3, few symbols +3
    assert title_score("Deep Learning for Robot Navigation") == 21
    # 20 chars of Japanese: +10 +5 +5 +3
    assert title_score("ニューラル機械翻訳の評価手法に関する研究") == 23


def test_full_width_year_is_not_metadata() -> None:
    assert is_metadata("2025年度 全国大会") is True
    assert is_metadata("２０２５年の展望と課題について") is False
