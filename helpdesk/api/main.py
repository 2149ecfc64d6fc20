"""FastAPI application entry point."""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI

from helpdesk.answering.service import HelpdeskService
from helpdesk.ingestion.scan_documents import discover_documents
from helpdesk.models.document import DocumentMeta
from helpdesk.models.qa import AskRequest, AskResponse

logger = logging.getLogger(__name__)

app = FastAPI(
    title="ProspectusHelpdesk",
    description="Program information lookups over the UCC prospectus",
    version="0.1.0",
)

helpdesk_service = HelpdeskService()


@app.get("/health")
def health() -> dict[str, str]:
    """Simple readiness probe."""
    return {"status": "ok"}


@app.get("/documents", response_model=List[DocumentMeta])
def documents() -> List[DocumentMeta]:
    """List the prospectus PDFs that /ask can answer from."""
    return discover_documents(answerable_only=True)


@app.post("/ask", response_model=AskResponse)
def ask(payload: AskRequest) -> AskResponse:
    """Answer a program question from the requested prospectus."""
    logger.info("Helpdesk question against %s", payload.document)
    reply = helpdesk_service.answer(payload.question, payload.document)
    return AskResponse(answer=reply, document=payload.document)
