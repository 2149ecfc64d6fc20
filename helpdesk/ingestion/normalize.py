"""Clean raw PDF text into a single canonical string."""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, List, Optional, Sequence

from helpdesk.config import settings

logger = logging.getLogger(__name__)

CONTROL_CHARS_PATTERN = re.compile(r"[\u0000-\u001F\u007F-\u009F]")
NEWLINE_RUN_PATTERN = re.compile(r"(?:\r\n|\n|\r)+")
WHITESPACE_RUN_PATTERN = re.compile(r"\s+")
HYPHEN_BREAK_PATTERN = re.compile(r"(?<=\w)-\s+(?=\w)", re.ASCII)


def strip_control(text: str) -> str:
    return CONTROL_CHARS_PATTERN.sub("", text)


def unify_newlines(text: str) -> str:
    return NEWLINE_RUN_PATTERN.sub("\n", text)


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RUN_PATTERN.sub(" ", text)


def join_hyphenation(text: str) -> str:
    """Rejoin words split across lines, e.g. ``comput- ing`` -> ``computing``."""
    return HYPHEN_BREAK_PATTERN.sub("", text)


def trim(text: str) -> str:
    return text.strip()


class TextNormalizer:
    """Applies named rewrite steps to the whole text, in order.

    The default order strips control characters before newlines are unified
    and collapses all whitespace before any line-based processing, so the
    output never contains a newline. Pass ``steps`` to run them differently.
    """

    def __init__(
        self,
        steps: Optional[Sequence[str]] = None,
        max_chars: Optional[int] = None,
    ) -> None:
        self.max_chars = settings.max_normalized_chars if max_chars is None else max_chars
        self.steps: List[str] = list(settings.normalization_steps if steps is None else steps)
        available = self._available_steps()
        unknown = [name for name in self.steps if name not in available]
        if unknown:
            raise ValueError(
                f"Unknown normalization steps {unknown}; expected any of {sorted(available)}."
            )
        self._pipeline = [available[name] for name in self.steps]

    def _available_steps(self) -> Dict[str, Callable[[str], str]]:
        return {
            "strip_control": strip_control,
            "unify_newlines": unify_newlines,
            "collapse_whitespace": collapse_whitespace,
            "join_hyphenation": join_hyphenation,
            "truncate": self.truncate,
            "trim": trim,
        }

    def truncate(self, text: str) -> str:
        return text[: self.max_chars]

    def normalize(self, raw: str) -> str:
        text = raw
        for step in self._pipeline:
            text = step(text)
        logger.debug("Normalized %s raw chars into %s chars", len(raw), len(text))
        return text


def normalize(raw: str, normalizer: Optional[TextNormalizer] = None) -> str:
    """Normalize ``raw`` with the configured step order."""
    return (normalizer or TextNormalizer()).normalize(raw)
