"""Keyword frequency counting over cleaned paper bodies."""

from __future__ import annotations

import logging
from collections import Counter

from models import Paper
from patterns import (
    BRACKETS_RE,
    DIGIT_RE,
    JAPANESE_RE,
    LATIN_RE,
    NUMERIC_RE,
    SHORT_LATIN_RE,
    SINGLE_HIRAGANA_RE,
    SYMBOL_RE,
    TOKEN_SPLIT_RE,
)
from vocabulary import DEFAULT_VOCABULARY, Vocabulary

LOGGER = logging.getLogger(__name__)

MIN_KEYWORD_LENGTH = 3
MAX_KEYWORD_LENGTH = 20
MAX_SYMBOL_RATIO = 0.3


def extract_words(text: str) -> list[str]:
    """Split text on whitespace and ASCII/full-width punctuation, ignoring brackets."""
    text = BRACKETS_RE.sub(" ", text)
    return [word for word in TOKEN_SPLIT_RE.split(text) if word.strip()]


def is_valid_keyword(word: str) -> bool:
    """Reject symbol-heavy tokens and digit tokens without any letters."""
    if len(SYMBOL_RE.findall(word)) > len(word) * MAX_SYMBOL_RATIO:
        return False
    has_letters = bool(JAPANESE_RE.search(word) or LATIN_RE.search(word))
    if DIGIT_RE.search(word) and not has_letters:
        return False
    return True


def is_countable(word: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> bool:
    """True when a normalized token should be counted as a keyword.

    Controlled AI terms such as "ai" are exempt from the minimum-length and
    short-Latin rules; every other rule still applies to them.
    """
    if word in vocabulary.stopwords:
        return False
    if len(word) > MAX_KEYWORD_LENGTH:
        return False
    if NUMERIC_RE.match(word):
        return False
    if SINGLE_HIRAGANA_RE.match(word):
        return False
    if not _is_exact_ai_term(word, vocabulary):
        if len(word) < MIN_KEYWORD_LENGTH or SHORT_LATIN_RE.match(word):
            return False
    return is_valid_keyword(word)


def matches_ai_term(word: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> bool:
    """Bidirectional containment: the token contains a term or a term contains it."""
    for term in vocabulary.ai_terms:
        term = term.lower()
        if term in word or word in term:
            return True
    return False


def analyze_keywords(
    papers: list[Paper],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> tuple[Counter[str], Counter[str]]:
    """Count keywords across all paper bodies.

    Returns:
        (keywords, ai_keywords). Every AI keyword is also counted in keywords,
        so ai_keywords[w] <= keywords[w] always holds.
    """
    keywords: Counter[str] = Counter()
    ai_keywords: Counter[str] = Counter()

    for paper in papers:
        for word in extract_words(paper.content):
            token = word.lower().strip()
            if not is_countable(token, vocabulary):
                continue
            keywords[token] += 1
            if matches_ai_term(token, vocabulary):
                ai_keywords[token] += 1

    LOGGER.info(
        "Keyword analysis: papers=%s unique_keywords=%s unique_ai_keywords=%s",
        len(papers),
        len(keywords),
        len(ai_keywords),
    )
    return keywords, ai_keywords


def top_keywords(frequencies: Counter[str], n: int) -> list[tuple[str, int]]:
    """Return the n most frequent entries; equal counts keep first-seen order."""
    return frequencies.most_common(n)


def _is_exact_ai_term(word: str, vocabulary: Vocabulary) -> bool:
    return any(word == term.lower() for term in vocabulary.ai_terms)
