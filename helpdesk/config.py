"""Application configuration loaded from environment variables."""

from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings."""

    documents_root: str = "public/documents"
    default_document: str = "ucc-prospectus.pdf"
    max_document_bytes: int = 5 * 1024 * 1024
    max_pages: int = 10
    pdf_processing_enabled: bool = Field(
        default=True,
        description="Disable to skip PDF decoding, e.g. during image builds.",
    )

    max_normalized_chars: int = 50_000
    normalization_steps: List[str] = Field(
        default_factory=lambda: [
            "strip_control",
            "unify_newlines",
            "collapse_whitespace",
            "join_hyphenation",
            "truncate",
            "trim",
        ],
        description="Ordered names of the text normalization steps.",
    )
    fallback_section_chars: int = 1_000
    prose_excerpt_chars: int = 500
    max_modules: int = 5

    canonical_url: str = "https://ucc.co.tz/programs"
    response_preamble: str = "UCC Helpdesk Official Response:"
    response_footer: str = "For complete details, please consult:"
    general_sentinel: str = "General information about UCC programs"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def documents_root_path(self) -> Path:
        return Path(self.documents_root)

    @property
    def unavailable_message(self) -> str:
        return (
            "We are currently updating our program records. "
            f"Please visit {self.canonical_url} for latest information."
        )


settings = Settings()
