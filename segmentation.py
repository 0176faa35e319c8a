"""Split one proceedings text blob into individual papers.

Several splitting strategies are tried over the same text and the one that
produces the most candidate papers wins. Every strategy is a plain function
``text -> list[Candidate]``; marker-based strategies raise MarkerNotFoundError
when their marker never occurs so that "not applicable" is distinguishable
from "applicable but nothing survived cleaning".

Selection is a strict-greater fold in priority order, so an exact tie keeps the
earlier, more structural strategy:

    page-marker > paper-id > abstract-marker > fixed-length
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Sequence

from content_cleaner import clean_content
from models import Candidate, Paper
from patterns import ABSTRACT_MARKER_RE, PAGE_MARKER_RE, PAPER_ID_RE
from title_extractor import extract_title

LOGGER = logging.getLogger(__name__)

# Marker-delimited fragments: raw length must exceed the first, cleaned the second.
MIN_FRAGMENT_CHARS = 500
MIN_CLEANED_CHARS = 200

# Fixed windows carry no structural signal, so they face stricter thresholds.
FIXED_WINDOW_CHARS = 3000
MIN_WINDOW_CHARS = 1000
MIN_WINDOW_CLEANED_CHARS = 500

Strategy = Callable[[str], list[Candidate]]


class MarkerNotFoundError(LookupError):
    """A marker-based strategy found no occurrence of its marker."""


def split_by_page_markers(text: str) -> list[Candidate]:
    """Split at each "- 1 -" first-page footer."""
    return _split_at_pattern(text, PAGE_MARKER_RE, "page markers")


def split_by_paper_ids(text: str) -> list[Candidate]:
    """Split at each programme paper ID such as 1A1-GS-10-01."""
    return _split_at_pattern(text, PAPER_ID_RE, "paper IDs")


def split_by_abstract_labels(text: str) -> list[Candidate]:
    """Split at each "Abstract:" / "要約：" / "概要：" label."""
    return _split_at_pattern(text, ABSTRACT_MARKER_RE, "abstract labels")


def split_by_fixed_length(text: str) -> list[Candidate]:
    """Last resort: cut the text into FIXED_WINDOW_CHARS windows."""
    candidates: list[Candidate] = []
    for start in range(0, len(text), FIXED_WINDOW_CHARS):
        window = text[start:start + FIXED_WINDOW_CHARS]
        if len(window.strip()) <= MIN_WINDOW_CHARS:
            continue
        candidate = _build_candidate(window, MIN_WINDOW_CLEANED_CHARS)
        if candidate is not None:
            candidates.append(candidate)
    return candidates


# Priority order matters: ties go to the earlier entry.
STRATEGIES: tuple[tuple[str, Strategy], ...] = (
    ("page-marker", split_by_page_markers),
    ("paper-id", split_by_paper_ids),
    ("abstract-marker", split_by_abstract_labels),
    ("fixed-length", split_by_fixed_length),
)


def select_best_strategy(
    text: str,
    strategies: Sequence[tuple[str, Strategy]] = STRATEGIES,
) -> tuple[str | None, list[Candidate]]:
    """Run every strategy and keep the one with the most candidates.

    Args:
        text: Full raw text of one source document.
        strategies: Ordered (name, function) pairs; defaults to STRATEGIES.

    Returns:
        (strategy_name, candidates) of the winner, or (None, []) when no strategy
        produced a single candidate.
    """
    best_name: str | None = None
    best: list[Candidate] = []

    for name, strategy in strategies:
        try:
            candidates = strategy(text)
        except MarkerNotFoundError as exc:
            LOGGER.debug("Segmentation strategy %s not applicable: %s", name, exc)
            continue

        LOGGER.debug("Segmentation strategy %s produced %s candidates", name, len(candidates))
        if len(candidates) > len(best):
            best_name = name
            best = candidates

    return best_name, best


def split_into_papers(text: str, first_index: int = 1) -> tuple[str | None, list[Paper]]:
    """Segment text into Paper records numbered from ``paper_{first_index}``.

    Returns the winning strategy name (None when nothing matched) and the papers.
    """
    strategy_name, candidates = select_best_strategy(text)
    papers = [
        Paper.from_content(
            paper_id=f"paper_{first_index + offset}",
            title=candidate.title,
            content=candidate.content,
        )
        for offset, candidate in enumerate(candidates)
    ]
    LOGGER.info("Found %s papers using %s", len(papers), strategy_name or "no strategy")
    return strategy_name, papers


def _split_at_pattern(text: str, pattern: re.Pattern[str], marker_name: str) -> list[Candidate]:
    starts = [match.start() for match in pattern.finditer(text)]
    if not starts:
        raise MarkerNotFoundError(f"No {marker_name} found")

    candidates: list[Candidate] = []
    for i, start in enumerate(starts):
        end = starts[i + 1] if i + 1 < len(starts) else len(text)
        fragment = text[start:end]
        if len(fragment) <= MIN_FRAGMENT_CHARS:
            continue
        candidate = _build_candidate(fragment, MIN_CLEANED_CHARS)
        if candidate is not None:
            candidates.append(candidate)
    return candidates


def _build_candidate(fragment: str, min_cleaned_chars: int) -> Candidate | None:
    content = clean_content(fragment)
    if len(content) <= min_cleaned_chars:
        return None
    return Candidate(title=extract_title(fragment), content=content)
