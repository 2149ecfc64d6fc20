"""Typed models shared across the application."""

from .details import DetailSet
from .document import DocumentMeta
from .qa import AskRequest, AskResponse

__all__ = [
    "AskRequest",
    "AskResponse",
    "DetailSet",
    "DocumentMeta",
]
