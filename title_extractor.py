"""Layered title heuristics for a paper fragment."""

from __future__ import annotations

import re
from typing import Callable

from patterns import (
    JAPANESE_RE,
    LATIN_RE,
    LATIN_WORD_RE,
    METADATA_PATTERNS,
    PAGE_MARKER_RE,
    PAPER_ID_RE,
    SYMBOL_RE,
)

UNKNOWN_TITLE = "unknown title"

MAX_SCANNED_LINES = 20
MAX_POSITION_LINES = 10
MIN_TITLE_LENGTH = 10
MAX_TITLE_LENGTH = 200
MAX_SYMBOL_RATIO = 0.3


def extract_title(fragment: str) -> str:
    """Return the best title for a fragment, or UNKNOWN_TITLE.

    Only the first MAX_SCANNED_LINES lines are inspected. Heuristics run in
    order and the first one that yields a title wins:

    1. text after a "- 1 -" page marker on the same line
    2. text after a programme paper ID (e.g. 1A1-GS-10-01)
    3. first title-like, non-metadata line among the first MAX_POSITION_LINES
    4. highest-scoring title-like, non-metadata line
    """
    lines = [line.strip() for line in fragment.split("\n")[:MAX_SCANNED_LINES]]

    heuristics: tuple[Callable[[list[str]], str | None], ...] = (
        _title_after_page_marker,
        _title_after_paper_id,
        _title_by_position,
        _title_by_score,
    )
    for heuristic in heuristics:
        title = heuristic(lines)
        if title:
            return title
    return UNKNOWN_TITLE


def is_valid_title(text: str) -> bool:
    """Length, script-presence and symbol-ratio check for a title candidate."""
    if not text or not MIN_TITLE_LENGTH <= len(text) <= MAX_TITLE_LENGTH:
        return False
    if not JAPANESE_RE.search(text) and not LATIN_RE.search(text):
        return False
    return len(SYMBOL_RE.findall(text)) / len(text) <= MAX_SYMBOL_RATIO


def is_metadata(line: str) -> bool:
    """True for society names, room/chair labels, contact lines and similar."""
    return any(pattern.search(line) for pattern in METADATA_PATTERNS)


def title_score(text: str) -> int:
    """Heuristic preference for mid-length, mixed-script, low-symbol lines."""
    score = 0
    if 20 <= len(text) <= 80:
        score += 10
    if 15 <= len(text) <= 100:
        score += 5
    if JAPANESE_RE.search(text):
        score += 5
    if LATIN_WORD_RE.search(text):
        score += 3
    if len(SYMBOL_RE.findall(text)) <= 3:
        score += 3
    return score


def _text_after(pattern: re.Pattern[str], lines: list[str]) -> str | None:
    for line in lines:
        match = pattern.search(line)
        if match is None:
            continue
        candidate = line[match.end():].strip()
        if is_valid_title(candidate):
            return candidate
    return None


def _title_after_page_marker(lines: list[str]) -> str | None:
    return _text_after(PAGE_MARKER_RE, lines)


def _title_after_paper_id(lines: list[str]) -> str | None:
    return _text_after(PAPER_ID_RE, lines)


def _title_by_position(lines: list[str]) -> str | None:
    for line in lines[:MAX_POSITION_LINES]:
        if is_valid_title(line) and not is_metadata(line):
            return line
    return None


def _title_by_score(lines: list[str]) -> str | None:
    candidates = [line for line in lines if is_valid_title(line) and not is_metadata(line)]
    if not candidates:
        return None
    # max() keeps the earliest line on equal scores
    return max(candidates, key=title_score)
