"""Human-readable summary statements derived from the aggregated maps."""

from __future__ import annotations

import math
from collections import Counter
from typing import Mapping

from field_classifier import field_shares
from models import Insight, Paper


def average_length(papers: list[Paper]) -> int:
    """Mean content length rounded half up; 0 for an empty corpus."""
    if not papers:
        return 0
    return math.floor(sum(p.length for p in papers) / len(papers) + 0.5)


def generate_insights(
    papers: list[Paper],
    keywords: Counter[str],
    ai_keywords: Counter[str],
    fields: Mapping[str, int],
) -> list[Insight]:
    """Derive the ordered insight list.

    Insights whose source map is empty are omitted; the corpus insight is always
    present and reports zero papers rather than dividing by zero.
    """
    insights: list[Insight] = []

    if keywords:
        word, count = keywords.most_common(1)[0]
        insights.append(Insight(
            title="Main trend",
            content=f"The most frequent keyword is '{word}', appearing {count} times.",
        ))

    if ai_keywords:
        word, count = ai_keywords.most_common(1)[0]
        insights.append(Insight(
            title="AI technology focus",
            content=f"Among AI-related terms, '{word}' draws the most attention with {count} mentions.",
        ))

    shares = field_shares(fields)
    if shares:
        # first field in first-matched order wins a tie
        top_field = max(fields, key=lambda name: fields[name])
        insights.append(Insight(
            title="Research field trend",
            content=(
                f"'{top_field}' is the most active field, accounting for "
                f"{shares[top_field]:.1f}% of all field matches."
            ),
        ))

    insights.append(Insight(
        title="Corpus profile",
        content=(
            f"{len(papers)} papers were analyzed, with an average length of "
            f"{average_length(papers)} characters."
        ),
    ))
    return insights
