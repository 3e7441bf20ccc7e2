"""pypdf helpers for loading documents and copying single pages."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

from pypdf import PdfReader, PdfWriter

from pdf_splitter.application.errors import PdfReadError


def load_pdf(pdf_path: Path) -> PdfReader:
    """Open a PDF and force parsing of its page tree."""
    try:
        reader = PdfReader(str(pdf_path))
        len(reader.pages)
    except Exception as exc:
        raise PdfReadError(f"Could not read PDF file {pdf_path}: {exc}") from exc
    return reader


def single_page_pdf_bytes(reader: PdfReader, page_index: int) -> bytes:
    """Copy one page into a new document and serialize it."""
    writer = PdfWriter()
    writer.add_page(reader.pages[page_index])
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def write_single_page_pdf(reader: PdfReader, page_index: int, output_path: Path) -> None:
    output_path.write_bytes(single_page_pdf_bytes(reader, page_index))
