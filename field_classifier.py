"""Research-field scoring via keyword occurrence counts."""

from __future__ import annotations

import logging
import re
from typing import Mapping, Sequence

from models import Paper
from vocabulary import FIELD_KEYWORDS

LOGGER = logging.getLogger(__name__)


def score_paper_against_field(content: str, keywords: Sequence[str]) -> int:
    """Return the total number of case-insensitive keyword occurrences in content."""
    return sum(
        len(re.findall(re.escape(kw), content, flags=re.IGNORECASE))
        for kw in keywords
    )


def classify_fields(
    papers: list[Paper],
    field_keywords: Mapping[str, Sequence[str]] = FIELD_KEYWORDS,
) -> dict[str, int]:
    """Accumulate per-field keyword counts across the whole corpus.

    A field is only inserted once some paper scores positively for it, so the
    result never holds a zero entry. Fields keep the order of their first
    positive match in the corpus.

    Args:
        papers: Segmented papers of the current run.
        field_keywords: Field label -> representative keywords.

    Returns:
        Mapping of field label to its corpus-wide score.
    """
    fields: dict[str, int] = {}

    for paper in papers:
        content = paper.content.lower()
        for field_name, keywords in field_keywords.items():
            score = score_paper_against_field(content, keywords)
            if score > 0:
                fields[field_name] = fields.get(field_name, 0) + score

    LOGGER.info(
        "classify_fields: %s of %s fields matched across %s papers",
        len(fields),
        len(field_keywords),
        len(papers),
    )
    return fields


def field_shares(fields: Mapping[str, int]) -> dict[str, float]:
    """Percentage share of each field in the total score (empty when no scores)."""
    total = sum(fields.values())
    if total == 0:
        return {}
    return {name: score / total * 100 for name, score in fields.items()}
