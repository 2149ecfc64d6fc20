"""Response composition and the end-to-end helpdesk pipeline."""

from .composer import compose
from .service import HelpdeskService, answer

__all__ = ["HelpdeskService", "answer", "compose"]
