"""Raw text loading for proceedings sources (local PDF/text files or URLs)."""

from __future__ import annotations

import io
import logging
import math
import os
from functools import partial
from pathlib import Path
from typing import Callable

import requests
from pypdf import PdfReader
from pypdf.errors import PdfReadError

LOGGER = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = int(os.getenv("REQUEST_TIMEOUT_SECONDS", "60"))
# Proceedings volumes open with the programme; full papers follow around halfway.
_DEFAULT_START_FRACTION = 0.5
_TEXT_SUFFIXES = frozenset({".txt", ".text", ".md"})


class SourceError(RuntimeError):
    """Raised when a source cannot be turned into raw text."""


def start_fraction_from_env() -> float:
    """Read PAGE_START_FRACTION, falling back to 0.5."""
    raw = os.getenv("PAGE_START_FRACTION")
    if not raw:
        return _DEFAULT_START_FRACTION
    try:
        value = float(raw)
    except ValueError as exc:
        raise SourceError(f"PAGE_START_FRACTION must be a number, got {raw!r}") from exc
    if not 0.0 <= value < 1.0:
        raise SourceError(f"PAGE_START_FRACTION must be in [0, 1), got {value}")
    return value


def page_range(num_pages: int, start_fraction: float) -> range:
    """Zero-based page indices from floor(num_pages * start_fraction) to the end.

    The first analysed page is max(1, floor(num_pages * start_fraction)) in
    one-based numbering.
    """
    first = max(1, math.floor(num_pages * start_fraction))
    return range(first - 1, num_pages)


def extract_pdf_text(data: bytes, start_fraction: float | None = None) -> str:
    """Extract text from the trailing page range of a PDF, one page per block.

    Raises:
        SourceError: the bytes are not a readable PDF.
    """
    if start_fraction is None:
        start_fraction = start_fraction_from_env()

    try:
        reader = PdfReader(io.BytesIO(data))
        num_pages = len(reader.pages)
        pages = page_range(num_pages, start_fraction)
        chunks = [(reader.pages[i].extract_text() or "") + "\n" for i in pages]
    except (PdfReadError, ValueError) as exc:
        raise SourceError(f"Unreadable PDF: {exc}") from exc

    LOGGER.info(
        "PDF extract: pages=%s analysed=%s-%s chars=%s",
        num_pages,
        pages.start + 1 if pages else 0,
        pages.stop,
        sum(len(c) for c in chunks),
    )
    return "".join(chunks)


def fetch_bytes(url: str) -> bytes:
    """Download a source over HTTP(S)."""
    try:
        response = requests.get(url, timeout=REQUEST_TIMEOUT_SECONDS)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise SourceError(f"Failed to fetch {url}: {exc}") from exc
    return response.content


def load_text(location: str, start_fraction: float | None = None) -> str:
    """Return raw text for a local path or URL.

    PDFs (by suffix, or by content for URLs) go through extract_pdf_text; plain
    text files are read as UTF-8 and returned whole.
    """
    if _is_url(location):
        data = fetch_bytes(location)
        if data.startswith(b"%PDF") or location.lower().endswith(".pdf"):
            return extract_pdf_text(data, start_fraction)
        return data.decode("utf-8", errors="replace")

    path = Path(location)
    if not path.is_file():
        raise SourceError(f"Source not found: {location}")

    suffix = path.suffix.lower()
    if suffix == ".pdf":
        return extract_pdf_text(path.read_bytes(), start_fraction)
    if suffix in _TEXT_SUFFIXES:
        return path.read_text(encoding="utf-8")
    raise SourceError(f"Unsupported source type {suffix or '(none)'}: {location}")


def text_loader(location: str, start_fraction: float | None = None) -> Callable[[], str]:
    """Deferred load_text, so extraction runs (and may fail) inside the batch loop."""
    return partial(load_text, location, start_fraction)


def _is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))
