"""Noise removal for raw paper fragments extracted from proceedings PDFs.

Cleaning works line by line. Text without a line break is treated as a body
whose lines were already joined with spaces: only the rules that cannot reach
across a joined line boundary apply to it, so cleaned output passes through
clean_content unchanged.
"""

from __future__ import annotations

import re

from patterns import (
    IMPORTANT_SHORT_LINE_PATTERNS,
    JOINED_NOISE_LINE_PATTERNS,
    JOINED_REMOVAL_PATTERNS,
    NOISE_LINE_PATTERNS,
    REMOVAL_PATTERNS,
)

MIN_LINE_LENGTH = 10
_WHITESPACE_RE = re.compile(r"\s+")


def clean_content(raw: str) -> str:
    """Return the cleaned body text of a paper fragment.

    Multi-line input gets one strike-through pass over the whole text, then each
    line is struck again until no pattern matches it, then the line filter joins
    the survivors. Single-line input is settled with the joined-safe rules only.
    """
    text = raw.strip()
    if "\n" not in text:
        return _clean_joined(text)
    lines = (_settle(line, REMOVAL_PATTERNS) for line in strike_patterns(text).split("\n"))
    return filter_lines("\n".join(lines))


def _clean_joined(text: str) -> str:
    body = _settle(text, JOINED_REMOVAL_PATTERNS)
    if not body or not _keeps(body, JOINED_NOISE_LINE_PATTERNS):
        return ""
    return body


def _settle(text: str, patterns: tuple[re.Pattern[str], ...]) -> str:
    # Every effective strike removes non-space characters, so this terminates.
    text = _WHITESPACE_RE.sub(" ", text).strip()
    while True:
        settled = _WHITESPACE_RE.sub(" ", strike_patterns(text, patterns)).strip()
        if settled == text:
            return text
        text = settled


def strike_patterns(content: str, patterns: tuple[re.Pattern[str], ...] = REMOVAL_PATTERNS) -> str:
    """Replace every boilerplate pattern match with a single space, in order."""
    for pattern in patterns:
        content = pattern.sub(" ", content)
    return content


def filter_lines(content: str) -> str:
    """Drop empty, noisy and uninformative short lines; join the rest with spaces."""
    kept: list[str] = []
    for line in content.split("\n"):
        line = line.strip()
        if line and _keeps(line, NOISE_LINE_PATTERNS):
            kept.append(line)
    return " ".join(kept)


def _keeps(line: str, noise_patterns: tuple[re.Pattern[str], ...]) -> bool:
    if is_noise_line(line, noise_patterns):
        return False
    return len(line) >= MIN_LINE_LENGTH or is_important_short_line(line)


def is_noise_line(line: str, patterns: tuple[re.Pattern[str], ...] = NOISE_LINE_PATTERNS) -> bool:
    return any(pattern.search(line) for pattern in patterns)


def is_important_short_line(line: str) -> bool:
    """True for short section headers such as "結論" or "Results"."""
    return any(pattern.search(line) for pattern in IMPORTANT_SHORT_LINE_PATTERNS)
