"""Request/response models for the public API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from helpdesk.config import settings


class AskRequest(BaseModel):
    """Incoming helpdesk question payload."""

    question: str = Field(..., min_length=1)
    document: str = Field(
        default_factory=lambda: settings.default_document,
        description="File name of the prospectus under the documents root.",
    )


class AskResponse(BaseModel):
    """Answer returned to the tool caller."""

    answer: str
    document: str
