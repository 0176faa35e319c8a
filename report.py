"""Plain-text report of an analysis run, printed by the CLI.

Sections, in order:

  Summary       paper count, unique keywords, average paper length
  Keywords      top TOP_KEYWORDS_N general keywords
  AI keywords   top TOP_AI_KEYWORDS_N AI/ML keywords
  Fields        every matched research field with its score share
  Insights      the derived insight list
"""

from __future__ import annotations

import os
from collections import Counter

from field_classifier import field_shares
from insights import average_length
from keyword_analyzer import top_keywords
from models import AnalysisResult

# ---------------------------------------------------------------------------
# Configurable limits
# ---------------------------------------------------------------------------

TOP_KEYWORDS_N = int(os.getenv("TOP_KEYWORDS_N", "20"))
TOP_AI_KEYWORDS_N = 10


def format_report(result: AnalysisResult, top_n: int | None = None) -> str:
    """Render the result bundle as a fixed-width text report."""
    top_n = TOP_KEYWORDS_N if top_n is None else top_n
    lines: list[str] = []

    lines.append("== Summary ==")
    lines.append(f"Papers:            {len(result.papers)}")
    lines.append(f"Unique keywords:   {len(result.keywords)}")
    lines.append(f"Average length:    {average_length(result.papers)}")
    if result.failed_sources:
        lines.append(f"Skipped sources:   {', '.join(result.failed_sources)}")
    for name, strategy in result.strategies.items():
        lines.append(f"Segmentation:      {name} -> {strategy or 'none'}")
    lines.append("")

    lines.append(f"== Top {top_n} keywords ==")
    lines.extend(_frequency_lines(result.keywords, top_n))
    lines.append("")

    lines.append(f"== Top {TOP_AI_KEYWORDS_N} AI keywords ==")
    lines.extend(_frequency_lines(result.ai_keywords, TOP_AI_KEYWORDS_N))
    lines.append("")

    lines.append("== Research fields ==")
    shares = field_shares(result.fields)
    ranked = sorted(result.fields.items(), key=lambda kv: kv[1], reverse=True)
    if not ranked:
        lines.append("(none)")
    for name, score in ranked:
        lines.append(f"{name:<32} {score:>6}  {shares[name]:5.1f}%")
    lines.append("")

    lines.append("== Insights ==")
    for insight in result.insights:
        lines.append(f"- {insight.title}: {insight.content}")

    return "\n".join(lines)


def _frequency_lines(frequencies: Counter[str], n: int) -> list[str]:
    rows = top_keywords(frequencies, n)
    if not rows:
        return ["(none)"]
    return [f"{rank:>3}. {word:<24} {count:>6}" for rank, (word, count) in enumerate(rows, 1)]
