"""CSV/JSON file sink for analysis results."""

from __future__ import annotations

import csv
import json
import logging
import os
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from field_classifier import field_shares
from models import AnalysisResult

OUTPUT_DIR = os.getenv("OUTPUT_DIR", "analysis_output")

LOGGER = logging.getLogger(__name__)

PAPERS_CSV = "papers.csv"
KEYWORDS_CSV = "keywords.csv"
AI_KEYWORDS_CSV = "ai_keywords.csv"
FIELDS_CSV = "fields.csv"
INSIGHTS_CSV = "insights.csv"
ANALYSIS_JSON = "analysis.json"

PAPERS_COLUMNS = ["paper_id", "title", "length", "content"]
KEYWORD_COLUMNS = ["rank", "keyword", "count"]
FIELD_COLUMNS = [
    "rank",
    "field",
    "score",
    "share_pct",  # share of the summed field scores, one decimal
]
INSIGHT_COLUMNS = ["title", "content"]


def write_results(result: AnalysisResult, output_dir: str | None = None) -> list[Path]:
    """Write every table of the result bundle plus a JSON snapshot.

    Existing files are overwritten; each run's outputs stand alone.

    Args:
        result: Bundle returned by pipeline.run_analysis.
        output_dir: Target directory, created if missing. Defaults to OUTPUT_DIR.

    Returns:
        Paths of the files written, in write order.
    """
    directory = Path(output_dir or OUTPUT_DIR)
    directory.mkdir(parents=True, exist_ok=True)

    paper_rows = [
        {"paper_id": p.paper_id, "title": p.title, "length": p.length, "content": p.content}
        for p in result.papers
    ]
    shares = field_shares(result.fields)
    field_rows = [
        {
            "rank": rank,
            "field": name,
            "score": score,
            "share_pct": f"{shares[name]:.1f}",
        }
        for rank, (name, score) in enumerate(
            sorted(result.fields.items(), key=lambda kv: kv[1], reverse=True), 1
        )
    ]

    written = [
        _write_csv(directory / PAPERS_CSV, PAPERS_COLUMNS, paper_rows),
        _write_csv(directory / KEYWORDS_CSV, KEYWORD_COLUMNS, _ranked_rows(result.keywords)),
        _write_csv(directory / AI_KEYWORDS_CSV, KEYWORD_COLUMNS, _ranked_rows(result.ai_keywords)),
        _write_csv(directory / FIELDS_CSV, FIELD_COLUMNS, field_rows),
        _write_csv(
            directory / INSIGHTS_CSV,
            INSIGHT_COLUMNS,
            [insight._asdict() for insight in result.insights],
        ),
        _write_json(directory / ANALYSIS_JSON, result),
    ]

    LOGGER.info(
        "Wrote %s papers, %s keywords, %s fields to %s",
        len(paper_rows),
        len(result.keywords),
        len(field_rows),
        directory,
    )
    return written


def _ranked_rows(frequencies: Any) -> list[dict[str, Any]]:
    return [
        {"rank": rank, "keyword": keyword, "count": count}
        for rank, (keyword, count) in enumerate(frequencies.most_common(), 1)
    ]


def _write_csv(path: Path, columns: list[str], rows: list[dict[str, Any]]) -> Path:
    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=columns, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(rows)
    return path


def _write_json(path: Path, result: AnalysisResult) -> Path:
    payload = result.to_dict()
    payload["generated_at"] = datetime.now(UTC).isoformat()
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return path
