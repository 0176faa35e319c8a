"""End-to-end analysis of a batch of proceedings documents."""

from __future__ import annotations

import logging
from typing import Callable, Sequence, Union

from field_classifier import classify_fields
from insights import generate_insights
from keyword_analyzer import analyze_keywords
from models import AnalysisResult, Paper
from segmentation import split_into_papers
from vocabulary import Vocabulary, load_vocabulary

LOGGER = logging.getLogger(__name__)

ProgressCallback = Callable[[float, str], None]
# Raw text, or a zero-argument callable that extracts it on demand.
TextSource = Union[str, Callable[[], str]]


def run_analysis(
    documents: Sequence[tuple[str, TextSource]],
    progress: ProgressCallback | None = None,
    vocabulary: Vocabulary | None = None,
) -> AnalysisResult:
    """Segment every document and build keyword, field and insight aggregates.

    Documents are processed one after another. A document whose text cannot be
    produced or segmented is logged and skipped; the run continues with the rest.
    Every call builds a fresh result, so runs never share state.

    Args:
        documents: Ordered (source_name, text_source) pairs.
        progress: Optional observer called as progress(percent, label).
        vocabulary: Lookup tables; loaded via load_vocabulary() when omitted.
            Vocabulary errors are raised before any document is touched.

    Returns:
        The AnalysisResult bundle for this run.
    """
    if vocabulary is None:
        vocabulary = load_vocabulary()
    report = progress or _no_progress

    result = AnalysisResult()
    papers: list[Paper] = []
    total = len(documents)

    report(0, f"Processing documents... (0/{total})")
    for i, (name, source) in enumerate(documents):
        try:
            text = source() if callable(source) else source
            strategy, doc_papers = split_into_papers(text, first_index=len(papers) + 1)
        except Exception:
            LOGGER.exception("Failed processing source=%s, skipping", name)
            result.failed_sources.append(name)
        else:
            papers.extend(doc_papers)
            result.sources.append(name)
            result.strategies[name] = strategy
            LOGGER.info(
                "Source %s: strategy=%s papers=%s", name, strategy, len(doc_papers)
            )
        report((i + 1) / total * 50, f"Processed {name} ({i + 1}/{total})")

    report(50, "Text extraction complete")
    result.papers = papers

    report(60, "Analyzing keywords...")
    result.keywords, result.ai_keywords = analyze_keywords(papers, vocabulary)
    report(75, "Keyword analysis complete")

    report(85, "Classifying research fields...")
    result.fields = classify_fields(papers, vocabulary.field_keywords)
    report(95, "Field classification complete")

    result.insights = generate_insights(
        papers, result.keywords, result.ai_keywords, result.fields
    )
    report(100, "Analysis complete")

    LOGGER.info(
        "Run complete. sources=%s failed=%s papers=%s keywords=%s",
        len(result.sources),
        len(result.failed_sources),
        len(papers),
        len(result.keywords),
    )
    return result


def _no_progress(percent: float, label: str) -> None:
    return None
