"""Document-level data models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class DocumentMeta(BaseModel):
    """A prospectus PDF found under the documents root."""

    file_name: str
    title: str
    size_bytes: int
    answerable: bool = True
    unavailable_reason: Optional[str] = None
