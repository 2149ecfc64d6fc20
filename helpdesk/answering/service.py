"""Glue module that turns a prospectus and a question into a helpdesk reply."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from helpdesk.answering.composer import compose
from helpdesk.config import settings
from helpdesk.exceptions import EmptyDocument, HelpdeskError
from helpdesk.ingestion.acquire import acquire_document_text
from helpdesk.ingestion.normalize import TextNormalizer
from helpdesk.retrieval.extractor import extract
from helpdesk.retrieval.locator import PROGRAM_SECTIONS, KeywordTable, locate

logger = logging.getLogger(__name__)

DocumentAcquirer = Callable[[str], str]


class HelpdeskService:
    """Runs acquire, normalize, locate, extract and compose for one question.

    Holds no per-request state; the document is fetched and normalized on
    every call.
    """

    def __init__(
        self,
        acquirer: Optional[DocumentAcquirer] = None,
        normalizer: Optional[TextNormalizer] = None,
        table: Optional[KeywordTable] = None,
    ) -> None:
        self.acquirer = acquirer or acquire_document_text
        self.normalizer = normalizer or TextNormalizer()
        self.table = PROGRAM_SECTIONS if table is None else table

    def respond(self, query: str, document_identifier: str) -> str:
        """Build the reply, letting acquisition errors propagate."""
        text = self.normalizer.normalize(self.acquirer(document_identifier))
        if not text:
            raise EmptyDocument(f"No text extracted from {document_identifier!r}.")
        section = locate(text, query, self.table)
        return compose(extract(section, query))

    def answer(self, query: str, document_identifier: str) -> str:
        """Build the reply, replacing any failure with the records-update notice."""
        try:
            return self.respond(query, document_identifier)
        except HelpdeskError as exc:
            logger.warning("Helpdesk lookup in %s failed: %s", document_identifier, exc)
        except Exception:
            logger.exception("Unexpected helpdesk failure for %s", document_identifier)
        return settings.unavailable_message


def answer(query: str, document_identifier: str) -> str:
    try:
        service = HelpdeskService()
    except ValueError as exc:
        logger.error("Helpdesk is misconfigured: %s", exc)
        return settings.unavailable_message
    return service.answer(query, document_identifier)
