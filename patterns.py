"""Regex tables for segmentation, title detection and content cleaning.

Pure configuration: the algorithms in segmentation.py, title_extractor.py and
content_cleaner.py only iterate over these tables. Edit the tables, not the logic,
when a proceedings layout needs another boilerplate rule.

Digits and word characters are spelled out as ASCII classes: full-width digits
and Japanese text must never count as numbers or word characters here.
"""

from __future__ import annotations

import re
from typing import NamedTuple

_I = re.IGNORECASE
_M = re.MULTILINE

# Hiragana, katakana and CJK unified ideographs.
JAPANESE_CHARS = "\u3040-\u309f\u30a0-\u30ff\u4e00-\u9faf"

JAPANESE_RE = re.compile(f"[{JAPANESE_CHARS}]")
LATIN_RE = re.compile(r"[a-zA-Z]")
# Anything that is not an ASCII word char, whitespace or Japanese script.
SYMBOL_RE = re.compile(f"[^A-Za-z0-9_\\s{JAPANESE_CHARS}]")
LATIN_WORD_RE = re.compile(r"(?<![A-Za-z0-9_])[A-Za-z]{3,}(?![A-Za-z0-9_])")


class Rule(NamedTuple):
    """A cleaning regex and whether it may reach across joined lines.

    ``spans_lines`` is True when a match can cover the space between the last
    word of one line and the first word of the next once the two are joined,
    without either line matching on its own. Such rules only run while the
    line breaks are still present.
    """

    pattern: re.Pattern[str]
    spans_lines: bool = False


# ─────────────────────────────────────────────────────────────────────────────
# Paper boundary markers
# ─────────────────────────────────────────────────────────────────────────────

# "- 1 -" footer printed on the first page of every paper (JSAI layout).
PAGE_MARKER_RE = re.compile(r"-\s*1\s*-")
# Programme identifiers such as 1A1-GS-10-01.
PAPER_ID_RE = re.compile(r"[0-9]+[A-Z][0-9]+-[A-Z]+-[0-9]+-[0-9]+")
ABSTRACT_MARKER_RE = re.compile(r"(abstract|要約|概要)\s*[:：]", _I)

# ─────────────────────────────────────────────────────────────────────────────
# Title metadata (lines that look like titles but are boilerplate)
# ─────────────────────────────────────────────────────────────────────────────

METADATA_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"©"),
    re.compile(r"人工知能学会"),
    re.compile(r"zoom", _I),
    re.compile(r"会議室"),
    re.compile(r"座長"),
    re.compile(r"[0-9]{4}年"),
    re.compile(r"conference", _I),
    re.compile(r"proceedings", _I),
    re.compile(r"session", _I),
    re.compile(r"abstract", _I),
    re.compile(r"^[0-9]+$"),
    re.compile(r"^[A-Z]$"),
    re.compile(r"@"),
    re.compile(r"https?://"),
    re.compile(r"tel:", _I),
    re.compile(r"fax:", _I),
)

# ─────────────────────────────────────────────────────────────────────────────
# Stage A: strike-through rules, applied in order, each match -> " "
# ─────────────────────────────────────────────────────────────────────────────

REMOVAL_RULES: tuple[Rule, ...] = (
    # page markers
    Rule(re.compile(r"-\s*[0-9]+\s*-\s*"), spans_lines=True),
    # society / proceedings boilerplate
    Rule(re.compile(r"©.*?(学会|society|conference).*$", _M | _I), spans_lines=True),
    Rule(re.compile(r"[0-9]{4}年度.*?(学会|大会|conference).*$", _M | _I), spans_lines=True),
    Rule(re.compile(r"(一般|general)セッション.*$", _M | _I)),
    Rule(re.compile(r"座長[:：].*$", _M | _I)),
    Rule(re.compile(r"(会議室|room|hall)\s*[0-9]+.*$", _M | _I), spans_lines=True),
    Rule(re.compile(r"(zoom|teams|webex).*?(こちら|here|link).*$", _M | _I), spans_lines=True),
    Rule(re.compile(r"[0-9]{2}:[0-9]{2}\s*[〜~-]\s*[0-9]{2}:[0-9]{2}"), spans_lines=True),
    # URLs and contact details
    Rule(re.compile(r"https?://[^\s]+", _I)),
    Rule(re.compile(r"www\.[^\s]+", _I)),
    Rule(re.compile(r"(問い合わせ先|contact|inquiry).*?$", _M | _I)),
    Rule(re.compile(r"(連絡先|address|contact).*?$", _M | _I)),
    Rule(re.compile(r"〒[0-9]{3}-?[0-9]{4}.*?$", _M | _I)),
    Rule(re.compile(r"(tel|phone|fax).*?[0-9]", _I), spans_lines=True),
    Rule(re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")),
    # citations, captions, back matter
    Rule(re.compile(r"^\s*\[[0-9]+\].*?$", _M)),
    Rule(re.compile(r"(参考文献|references?).*$", _M | _I)),
    Rule(re.compile(r"(図|fig\.?|figure)\s*[0-9]+.*$", _M), spans_lines=True),
    Rule(re.compile(r"(表|table)\s*[0-9]+.*$", _M), spans_lines=True),
    Rule(re.compile(r"(謝辞|acknowledgment?).*$", _M | _I)),
    # section labels and layout debris
    Rule(re.compile(r"(abstract|要約|概要)\s*[:：]", _I), spans_lines=True),
    Rule(re.compile(r"(keywords?|キーワード)\s*[:：]", _I), spans_lines=True),
    Rule(re.compile(r"^\s*[0-9]+\s*$", _M)),
    Rule(re.compile(r"^\s*[A-Z]\s*$", _M)),
    Rule(re.compile(r"^\s*[・•]\s*$", _M)),
    Rule(re.compile(r"^\s*[\-=_]{3,}\s*$", _M)),
    # affiliations
    Rule(re.compile(r"(大学|university|institute?)\s*(大学院|graduate)?\s*(研究科|school)?", _I)),
    Rule(re.compile(r"(株式会社|corporation|corp\.?|ltd\.?|inc\.?)", _I)),
    Rule(re.compile(r"(研究所|laboratory|lab\.?|center)", _I)),
)

REMOVAL_PATTERNS: tuple[re.Pattern[str], ...] = tuple(rule.pattern for rule in REMOVAL_RULES)
# Rules that are safe on a body whose lines were already joined with spaces.
JOINED_REMOVAL_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    rule.pattern for rule in REMOVAL_RULES if not rule.spans_lines
)

# ─────────────────────────────────────────────────────────────────────────────
# Stage B: line predicates
# ─────────────────────────────────────────────────────────────────────────────

NOISE_LINE_RULES: tuple[Rule, ...] = (
    Rule(re.compile(r"^[0-9]+$")),
    Rule(re.compile(r"^[A-Za-z]$")),
    Rule(re.compile(r"^[・•\-=_]+$")),
    Rule(re.compile(r"^page\s*[0-9]+", _I)),
    Rule(re.compile(r"^p\.\s*[0-9]+", _I)),
    Rule(re.compile(r"session\s*chair", _I), spans_lines=True),
    Rule(re.compile(r"room\s*[A-Za-z0-9_]+", _I), spans_lines=True),
    Rule(re.compile(r"building", _I)),
    Rule(re.compile(r"floor", _I)),
)

NOISE_LINE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(rule.pattern for rule in NOISE_LINE_RULES)
JOINED_NOISE_LINE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    rule.pattern for rule in NOISE_LINE_RULES if not rule.spans_lines
)

# Short section headers worth keeping even under the minimum line length.
IMPORTANT_SHORT_LINE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(結論|conclusion)", _I),
    re.compile(r"^(結果|results?)", _I),
    re.compile(r"^(手法|method)", _I),
    re.compile(r"^(実験|experiment)", _I),
    re.compile(r"^(提案|proposal)", _I),
)

# ─────────────────────────────────────────────────────────────────────────────
# Tokenization
# ─────────────────────────────────────────────────────────────────────────────

BRACKETS_RE = re.compile(r"[「」『』（）()【】［］\[\]]")
TOKEN_SPLIT_RE = re.compile(r"[\s.,;:!?。、，．；：！？]+")
NUMERIC_RE = re.compile(r"^[0-9]+$")
SHORT_LATIN_RE = re.compile(r"^[a-z]{1,2}$")
SINGLE_HIRAGANA_RE = re.compile("^[\u3040-\u309f]$")
DIGIT_RE = re.compile(r"[0-9]")
