"""Structured fields mined from a located prospectus section."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class DetailSet(BaseModel):
    """Optional program details; any combination may be missing."""

    duration: Optional[str] = None
    requirements: Optional[str] = None
    modules: List[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.duration is None and self.requirements is None and not self.modules
