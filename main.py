"""CLI entrypoint for the proceedings trend analyzer."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from csv_sink import write_results
from pipeline import run_analysis
from report import format_report
from sources import SourceError, start_fraction_from_env, text_loader
from vocabulary import VocabularyError, load_vocabulary

LOGGER = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(
        description="Segment conference proceedings into papers and report keyword and field trends"
    )
    parser.add_argument(
        "sources",
        nargs="*",
        help="Proceedings PDFs, text files or http(s) URLs, analysed in order",
    )
    parser.add_argument(
        "--start-fraction",
        type=float,
        default=None,
        help="Skip the leading fraction of PDF pages (default: PAGE_START_FRACTION or 0.5)",
    )
    parser.add_argument("--output-dir", default=None, help="Directory for CSV/JSON outputs (default: OUTPUT_DIR)")
    parser.add_argument("--top", type=int, default=None, help="Number of keywords in the report table")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Analyse and print the report without writing output files",
    )
    return parser.parse_args(argv)


def _log_progress(percent: float, label: str) -> None:
    LOGGER.info("[%3.0f%%] %s", percent, label)


def run(
    sources: list[str],
    start_fraction: float | None,
    output_dir: str | None,
    top_n: int | None,
    dry_run: bool,
) -> int:
    """Run one analysis and return the process exit code."""
    try:
        vocabulary = load_vocabulary()
        if start_fraction is None:
            start_fraction = start_fraction_from_env()
    except (VocabularyError, SourceError) as exc:
        LOGGER.error("Configuration error: %s", exc)
        return 2

    if not 0.0 <= start_fraction < 1.0:
        LOGGER.error("--start-fraction must be in [0, 1), got %s", start_fraction)
        return 2

    if not sources:
        LOGGER.warning("No sources given; the report will be empty")

    documents = [(location, text_loader(location, start_fraction)) for location in sources]
    result = run_analysis(documents, progress=_log_progress, vocabulary=vocabulary)

    print(format_report(result, top_n=top_n))

    if dry_run:
        LOGGER.info("[dry-run] Skipping output files")
        return 0

    try:
        written = write_results(result, output_dir)
    except OSError as exc:
        LOGGER.warning("Writing outputs failed (non-fatal): %s", exc)
        return 0

    LOGGER.info("Outputs: %s", ", ".join(str(p) for p in written))
    return 0


def main() -> None:
    """Initialize config and execute one analysis run."""
    load_dotenv()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    args = parse_args()
    sys.exit(
        run(
            sources=args.sources,
            start_fraction=args.start_fraction,
            output_dir=args.output_dir,
            top_n=args.top,
            dry_run=args.dry_run,
        )
    )


if __name__ == "__main__":
    main()
