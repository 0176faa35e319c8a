from __future__ import annotations

from collections import Counter

import pytest

import report
from models import AnalysisResult, Insight, Paper
from report import format_report


def _result() -> AnalysisResult:
    return AnalysisResult(
        papers=[
            Paper.from_content("paper_1", "Title One", "x" * 300),
            Paper.from_content("paper_2", "Title Two", "y" * 501),
        ],
        keywords=Counter({"transformer": 3, "graphs": 2, "ロボット": 1}),
        ai_keywords=Counter({"transformer": 3}),
        fields={"Robotics": 1, "Computer Vision": 3},
        insights=[Insight(title="Main trend", content="The most frequent keyword is 'transformer'.")],
        sources=["a.pdf", "b.txt"],
        failed_sources=["broken.pdf"],
        strategies={"a.pdf": "page-marker", "b.txt": None},
    )


def _section(text: str, header: str) -> list[str]:
    """Lines between a section header and the next blank line."""
    lines = text.splitlines()
    start = lines.index(header) + 1
    section = []
    for line in lines[start:]:
        if not line:
            break
        section.append(line)
    return section


def test_summary_section() -> None:
    text = format_report(_result(), top_n=5)
    summary = _section(text, "== Summary ==")

    assert "Papers:            2" in summary
    assert "Unique keywords:   3" in summary
    assert "Average length:    401" in summary
    assert "Skipped sources:   broken.pdf" in summary
    assert "Segmentation:      a.pdf -> page-marker" in summary
    assert "Segmentation:      b.txt -> none" in summary


def test_keyword_tables() -> None:
    text = format_report(_result(), top_n=2)

    rows = _section(text, "== Top 2 keywords ==")
    assert [row.split() for row in rows] == [["1.", "transformer", "3"], ["2.", "graphs", "2"]]

    ai_rows = _section(text, "== Top 10 AI keywords ==")
    assert [row.split() for row in ai_rows] == [["1.", "transformer", "3"]]


def test_fields_are_ranked_with_shares() -> None:
    rows = _section(format_report(_result()), "== Research fields ==")
    assert rows[0].startswith("Computer Vision")
    assert rows[0].endswith("75.0%")
    assert rows[1].startswith("Robotics")
    assert rows[1].endswith("25.0%")


def test_insights_section_is_last() -> None:
    text = format_report(_result())
    assert text.splitlines()[-1] == "- Main trend: The most frequent keyword is 'transformer'."


def test_empty_result_renders_placeholders() -> None:
    text = format_report(AnalysisResult(), top_n=5)

    assert "Papers:            0" in text
    assert "Average length:    0" in text
    assert "Skipped sources" not in text
    assert _section(text, "== Top 5 keywords ==") == ["(none)"]
    assert _section(text, "== Top 10 AI keywords ==") == ["(none)"]
    assert _section(text, "== Research fields ==") == ["(none)"]


def test_default_top_n_comes_from_module_setting(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(report, "TOP_KEYWORDS_N", 1)
    text = format_report(_result())
    assert _section(text, "== Top 1 keywords ==") == [
        f"{1:>3}. {'transformer':<24} {3:>6}"
    ]
