"""Read prospectus PDFs into raw per-page text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

import fitz

from helpdesk.config import settings
from helpdesk.exceptions import AcquisitionFailure, TooLarge, UnsupportedFormat

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIX = ".pdf"


def resolve_document_path(identifier: str, root: Optional[Path] = None) -> Path:
    """Map a document identifier to a file below the documents root."""
    if not identifier.lower().endswith(SUPPORTED_SUFFIX):
        raise UnsupportedFormat(f"Only PDF files are supported, got {identifier!r}.")
    root_path = (root or settings.documents_root_path).resolve()
    path = (root_path / identifier).resolve()
    if root_path not in path.parents:
        raise AcquisitionFailure(f"Document {identifier!r} is outside {root_path}.")
    return path


def iter_page_words(page: fitz.Page) -> Iterable[str]:
    for word in page.get_text("words"):
        text = word[4].strip()
        if text:
            yield text


def decode_pdf(payload: bytes, max_pages: Optional[int] = None) -> str:
    """Return the text of the first ``max_pages`` pages, one line per page."""
    if max_pages is None:
        max_pages = settings.max_pages
    doc = fitz.open(stream=payload, filetype="pdf")
    try:
        pages: List[str] = []
        for page_index in range(min(doc.page_count, max_pages)):
            pages.append(" ".join(iter_page_words(doc[page_index])))
    finally:
        doc.close()
    return "\n".join(pages)


def acquire_document_text(identifier: str, root: Optional[Path] = None) -> str:
    """Load the raw text of a prospectus.

    Raises ``UnsupportedFormat`` for non-PDF identifiers and ``TooLarge`` for
    payloads above ``settings.max_document_bytes``. Read and decode errors are
    logged and produce an empty string.
    """
    if not settings.pdf_processing_enabled:
        logger.warning("PDF processing disabled; skipping %s", identifier)
        return ""

    path = resolve_document_path(identifier, root)
    try:
        size = path.stat().st_size
        if size > settings.max_document_bytes:
            raise TooLarge(identifier, size, settings.max_document_bytes)
        payload = path.read_bytes()
    except OSError as exc:
        logger.error("Could not read %s: %s", path, exc)
        return ""

    try:
        text = decode_pdf(payload)
    except Exception as exc:
        logger.error("PDF processing failed for %s: %s", identifier, exc)
        return ""
    logger.debug("Decoded %s chars from %s", len(text), path)
    return text
