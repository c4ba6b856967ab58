from __future__ import annotations

from pathlib import Path
from typing import Callable
import sys

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture()
def sample_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "sample.pdf"
    writer = PdfWriter()
    for _ in range(3):
        writer.add_blank_page(width=200, height=200)
    writer.add_metadata({"/Producer": "pdfxref-tests", "/Title": "Sample"})
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path


@pytest.fixture()
def stream_xref_document() -> bytes:
    header = b"%PDF-1.5\n"
    body = b"1 0 obj\n<< /Type /XRef /Size 2 /W [1 2 1] >>\nstream\nendstream\nendobj\n"
    return header + body + b"startxref\n" + str(len(header)).encode("ascii") + b"\n%%EOF\n"


@pytest.fixture()
def file_factory(tmp_path: Path) -> Callable[[str, bytes], Path]:
    def _create(filename: str, data: bytes) -> Path:
        path = tmp_path / filename
        path.write_bytes(data)
        return path

    return _create
