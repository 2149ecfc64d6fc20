"""Keyword-to-header section lookup over a normalized prospectus."""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional

from helpdesk.config import settings

logger = logging.getLogger(__name__)

KeywordTable = Mapping[str, str]

SECTION_BOUNDARY = "\n\n"

# Match order is table order: the first keyword found in the query wins.
PROGRAM_SECTIONS: KeywordTable = {
    "diploma": "DIPLOMA PROGRAMS",
    "degree": "DEGREE PROGRAMS",
    "computing": "COMPUTING DEPARTMENT",
    "business": "BUSINESS SCHOOL",
    "fee": "TUITION FEES",
}

PROSPECTUS_TOPICS: KeywordTable = {
    "admission": "ADMISSION REQUIREMENTS",
    "requirement": "ADMISSION REQUIREMENTS",
    "fee": "TUITION FEES",
    "tuition": "TUITION FEES",
    "certificate": "CERTIFICATE PROGRAMS",
    "diploma": "DIPLOMA PROGRAMS",
    "degree": "DEGREE PROGRAMS",
}


def match_header(query: str, table: KeywordTable) -> Optional[str]:
    """Return the header of the first table keyword contained in ``query``."""
    query_lower = query.lower()
    for keyword, header in table.items():
        if keyword in query_lower:
            return header
    return None


def header_span(text: str, header: str) -> Optional[str]:
    """Slice from ``header`` to the next blank line after it, or to the end."""
    start = text.find(header)
    if start < 0:
        return None
    end = text.find(SECTION_BOUNDARY, start + len(header))
    return text[start:end] if end > 0 else text[start:]


def matching_lines(text: str, query: str, max_chars: Optional[int] = None) -> str:
    """Join the lines mentioning any query word, capped at ``max_chars``."""
    if max_chars is None:
        max_chars = settings.fallback_section_chars
    words = query.lower().split()
    kept: List[str] = [
        line for line in text.split("\n") if any(word in line.lower() for word in words)
    ]
    return "\n".join(kept)[:max_chars]


def locate(
    text: str,
    query: str,
    table: KeywordTable,
    sentinel: Optional[str] = None,
) -> str:
    """Find the span of ``text`` most relevant to ``query``.

    Never returns an empty string: when no keyword matches, or the line scan
    keeps nothing, the general-information sentinel is returned.
    """
    if sentinel is None:
        sentinel = settings.general_sentinel

    header = match_header(query, table)
    if header is None:
        logger.debug("No section keyword in %r", query)
        return sentinel

    section = header_span(text, header)
    if section:
        logger.debug("Resolved %r to section %r", query, header)
        return section

    logger.debug("Header %r not in document; scanning lines for %r", header, query)
    return matching_lines(text, query) or sentinel
