"""Response template wrapped around the extracted details."""

from __future__ import annotations

from typing import Optional

from helpdesk.config import settings


def compose(
    detail_text: str,
    preamble: Optional[str] = None,
    footer: Optional[str] = None,
    canonical_url: Optional[str] = None,
) -> str:
    preamble = settings.response_preamble if preamble is None else preamble
    footer = settings.response_footer if footer is None else footer
    canonical_url = settings.canonical_url if canonical_url is None else canonical_url
    return f"""{preamble}

{detail_text}

{footer}
{canonical_url}""".strip()
