"""Shared typed models for the analysis pipeline."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, NamedTuple


@dataclass(frozen=True, slots=True)
class Paper:
    """One segmented proceedings entry with its cleaned body text."""

    paper_id: str
    title: str
    content: str
    length: int

    @classmethod
    def from_content(cls, paper_id: str, title: str, content: str) -> Paper:
        return cls(paper_id=paper_id, title=title, content=content, length=len(content))


class Candidate(NamedTuple):
    """A fragment accepted by a segmentation strategy, before numbering."""
    title: str
    content: str


class Insight(NamedTuple):
    title: str
    content: str


@dataclass
class AnalysisResult:
    """Output bundle of one analysis run, consumed by the report and sinks."""

    papers: list[Paper] = field(default_factory=list)
    keywords: Counter[str] = field(default_factory=Counter)
    ai_keywords: Counter[str] = field(default_factory=Counter)
    fields: dict[str, int] = field(default_factory=dict)
    insights: list[Insight] = field(default_factory=list)
    sources: list[str] = field(default_factory=list)
    failed_sources: list[str] = field(default_factory=list)
    # source name -> winning segmentation strategy (None when nothing matched)
    strategies: dict[str, str | None] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "papers": [
                {
                    "paper_id": p.paper_id,
                    "title": p.title,
                    "content": p.content,
                    "length": p.length,
                }
                for p in self.papers
            ],
            "keywords": dict(self.keywords.most_common()),
            "ai_keywords": dict(self.ai_keywords.most_common()),
            "fields": dict(self.fields),
            "insights": [insight._asdict() for insight in self.insights],
            "sources": list(self.sources),
            "failed_sources": list(self.failed_sources),
            "strategies": dict(self.strategies),
        }
