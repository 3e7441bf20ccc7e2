"""PDF infrastructure package."""

from pdf_splitter.infrastructure.pdf.composite import (
    CompositePageExtractionResult,
    CompositePageExtractor,
)
from pdf_splitter.infrastructure.pdf.documents import (
    load_pdf,
    single_page_pdf_bytes,
    write_single_page_pdf,
)
from pdf_splitter.infrastructure.pdf.extractors import (
    ExtractedPageText,
    PageTextExtractor,
    PdfMinerPageExtractor,
    PyPdfPageExtractor,
)

__all__ = [
    "CompositePageExtractionResult",
    "CompositePageExtractor",
    "ExtractedPageText",
    "PageTextExtractor",
    "PdfMinerPageExtractor",
    "PyPdfPageExtractor",
    "load_pdf",
    "single_page_pdf_bytes",
    "write_single_page_pdf",
]
