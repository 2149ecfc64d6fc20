"""Pattern recognizers that mine a section for program details."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from helpdesk.config import settings
from helpdesk.models.details import DetailSet

logger = logging.getLogger(__name__)

DURATION_PATTERN = re.compile(
    r"duration:?\s*(\d+\s*(years|semesters))", re.IGNORECASE | re.ASCII
)
REQUIREMENTS_PATTERN = re.compile(r"requirements:?([^.]+)", re.IGNORECASE)
MODULE_PATTERN = re.compile(r"- ([^\n]+)")


def recognize_duration(section: str) -> Optional[str]:
    match = DURATION_PATTERN.search(section)
    return match.group(1) if match else None


def recognize_requirements(section: str) -> Optional[str]:
    match = REQUIREMENTS_PATTERN.search(section)
    return match.group(1).strip() if match else None


def recognize_modules(section: str, limit: Optional[int] = None) -> List[str]:
    """Return up to ``limit`` bullet entries, each still prefixed with ``- ``."""
    if limit is None:
        limit = settings.max_modules
    return [match.group(0) for match in MODULE_PATTERN.finditer(section)][:limit]


def extract_details(section: str) -> DetailSet:
    return DetailSet(
        duration=recognize_duration(section),
        requirements=recognize_requirements(section),
        modules=recognize_modules(section),
    )


def render_details(details: DetailSet) -> List[str]:
    lines: List[str] = []
    if details.duration is not None:
        lines.append(f"• Duration: {details.duration}")
    if details.requirements is not None:
        lines.append(f"• Requirements: {details.requirements}")
    if details.modules:
        lines.append("• Key Modules:\n  " + "\n  ".join(details.modules))
    return lines


def fallback_prose(section: str, query: str, max_chars: Optional[int] = None) -> str:
    if max_chars is None:
        max_chars = settings.prose_excerpt_chars
    return f'Regarding "{query}", our records indicate:\n{section[:max_chars]}'


def extract(section: str, query: str) -> str:
    """Render the details found in ``section``, or an excerpt when there are none."""
    details = extract_details(section)
    if details.is_empty:
        logger.debug("No structured details found; returning excerpt")
        return fallback_prose(section, query)
    return "\n".join(render_details(details))
