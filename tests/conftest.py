from pathlib import Path
from typing import Callable, Sequence

import fitz
import pytest


@pytest.fixture
def documents_root(tmp_path: Path) -> Path:
    root = tmp_path / "documents"
    root.mkdir()
    return root


@pytest.fixture
def make_pdf(documents_root: Path) -> Callable[..., Path]:
    """Write a PDF with one text line per page under the documents root."""

    def _make(name: str, pages: Sequence[str]) -> Path:
        path = documents_root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            page.insert_text((72, 72), text)
        doc.save(str(path))
        doc.close()
        return path

    return _make
