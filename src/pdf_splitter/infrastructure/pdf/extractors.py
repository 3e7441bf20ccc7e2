"""Primary/fallback text extractors for single-page PDFs."""

from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from typing import Protocol

from pdfminer.high_level import extract_text as pdfminer_extract_text
from pypdf import PdfReader


@dataclass(frozen=True)
class ExtractedPageText:
    """Raw text of one page plus the strategy that produced it."""

    text: str
    strategy: str


class PageTextExtractor(Protocol):
    """Protocol for single-page PDF text extractors."""

    strategy_name: str

    def extract(self, page_pdf: bytes) -> ExtractedPageText:
        """Extract text from a serialized single-page PDF."""
        ...


class PyPdfPageExtractor:
    """Primary extractor using pypdf."""

    strategy_name = "pypdf"

    def extract(self, page_pdf: bytes) -> ExtractedPageText:
        reader = PdfReader(BytesIO(page_pdf))
        chunks = [page.extract_text() or "" for page in reader.pages]
        return ExtractedPageText(text="\n".join(chunks), strategy=self.strategy_name)


class PdfMinerPageExtractor:
    """Fallback extractor using pdfminer.six."""

    strategy_name = "pdfminer"

    def extract(self, page_pdf: bytes) -> ExtractedPageText:
        text = pdfminer_extract_text(BytesIO(page_pdf))
        return ExtractedPageText(text=text, strategy=self.strategy_name)
