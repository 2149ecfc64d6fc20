"""List the prospectus PDFs the helpdesk can answer from."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from helpdesk.config import settings
from helpdesk.ingestion.acquire import SUPPORTED_SUFFIX
from helpdesk.models.document import DocumentMeta

logger = logging.getLogger(__name__)


def availability(size_bytes: int) -> Optional[str]:
    """Return why a document of ``size_bytes`` cannot be served, if it cannot."""
    if not settings.pdf_processing_enabled:
        return "PDF processing is disabled."
    if size_bytes > settings.max_document_bytes:
        return f"Larger than the {settings.max_document_bytes} byte limit."
    return None


def describe_document(path: Path, root: Path) -> DocumentMeta:
    size_bytes = path.stat().st_size
    reason = availability(size_bytes)
    return DocumentMeta(
        file_name=path.relative_to(root).as_posix(),
        title=path.stem.replace("-", " ").replace("_", " ").strip(),
        size_bytes=size_bytes,
        answerable=reason is None,
        unavailable_reason=reason,
    )


def discover_documents(
    root: Optional[Path] = None, answerable_only: bool = False
) -> List[DocumentMeta]:
    """Describe every prospectus PDF below ``root``.

    ``file_name`` is the identifier ``acquire_document_text`` accepts. With
    ``answerable_only`` set, documents acquisition would reject are left out.
    """
    root_path = root or settings.documents_root_path
    if not root_path.exists():
        logger.warning("Documents root %s does not exist", root_path)
        return []

    metas = [
        describe_document(path, root_path)
        for path in sorted(root_path.rglob("*"))
        if path.is_file() and path.name.lower().endswith(SUPPORTED_SUFFIX)
    ]
    skipped = [meta.file_name for meta in metas if not meta.answerable]
    if skipped:
        logger.info("Documents that cannot be served: %s", skipped)
    if answerable_only:
        metas = [meta for meta in metas if meta.answerable]
    return metas
