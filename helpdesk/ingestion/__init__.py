"""Document acquisition and text normalization."""

from .acquire import acquire_document_text
from .normalize import TextNormalizer, normalize
from .scan_documents import discover_documents

__all__ = ["TextNormalizer", "acquire_document_text", "discover_documents", "normalize"]
