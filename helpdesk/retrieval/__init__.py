"""Section lookup and detail extraction."""

from .extractor import extract, extract_details
from .locator import PROGRAM_SECTIONS, PROSPECTUS_TOPICS, KeywordTable, locate

__all__ = [
    "KeywordTable",
    "PROGRAM_SECTIONS",
    "PROSPECTUS_TOPICS",
    "extract",
    "extract_details",
    "locate",
]
