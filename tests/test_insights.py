"""Unit tests for insights.py."""

from __future__ import annotations

from collections import Counter

from insights import average_length, generate_insights
from models import Insight, Paper


def _papers(*lengths: int) -> list[Paper]:
    return [
        Paper.from_content(paper_id=f"paper_{i}", title="unknown title", content="x" * n)
        for i, n in enumerate(lengths, start=1)
    ]


def test_empty_corpus_yields_only_profile_insight() -> None:
    insights = generate_insights([], Counter(), Counter(), {})
    assert insights == [
        Insight(
            title="Corpus profile",
            content="0 papers were analyzed, with an average length of 0 characters.",
        )
    ]


def test_full_insight_list_in_order() -> None:
    insights = generate_insights(
        _papers(10, 21),
        Counter({"graphs": 3, "ai": 2}),
        Counter({"ai": 2}),
        {"Robotics": 2, "Computer Vision": 1},
    )

    assert [i.title for i in insights] == [
        "Main trend",
        "AI technology focus",
        "Research field trend",
        "Corpus profile",
    ]
    assert insights[0].content == "The most frequent keyword is 'graphs', appearing 3 times."
    assert insights[1].content == "Among AI-related terms, 'ai' draws the most attention with 2 mentions."
    assert insights[2].content == (
        "'Robotics' is the most active field, accounting for 66.7% of all field matches."
    )
    assert insights[3].content == "2 papers were analyzed, with an average length of 16 characters."


def test_ai_and_field_insights_are_omitted_when_empty() -> None:
    insights = generate_insights(_papers(300), Counter({"graphs": 1}), Counter(), {})
    assert [i.title for i in insights] == ["Main trend", "Corpus profile"]


def test_field_tie_goes_to_first_field() -> None:
    insights = generate_insights(_papers(300), Counter(), Counter(), {"Computer Vision": 2, "Robotics": 2})
    assert insights[0].content == (
        "'Computer Vision' is the most active field, accounting for 50.0% of all field matches."
    )


def test_keyword_tie_goes_to_first_seen() -> None:
    keywords = Counter()
    for word in ["beta", "alpha", "alpha", "beta"]:
        keywords[word] += 1
    insights = generate_insights(_papers(300), keywords, Counter(), {})
    assert "'beta'" in insights[0].content


def test_average_length_rounds_half_up() -> None:
    assert average_length(_papers(1, 2)) == 2
    assert average_length(_papers(1, 1, 2)) == 1
    assert average_length(_papers(5)) == 5


def test_average_length_of_empty_corpus() -> None:
    assert average_length([]) == 0
