"""Application use-case for splitting a PDF page by page."""

from __future__ import annotations

import logging
from pathlib import Path
from uuid import uuid4

from pdf_splitter.application.errors import InputFileNotFoundError
from pdf_splitter.application.text_normalizer import normalize_page_text
from pdf_splitter.domain.pdf_document import (
    EXTRACTION_FAILED_PLACEHOLDER,
    ExtractedPage,
    PageExtractionSummary,
    PdfInfo,
    page_file_suffix,
)
from pdf_splitter.infrastructure.pdf.composite import CompositePageExtractor
from pdf_splitter.infrastructure.pdf.documents import (
    load_pdf,
    single_page_pdf_bytes,
    write_single_page_pdf,
)

LOGGER = logging.getLogger(__name__)

FAILED_STRATEGY = "failed"


class PdfPageSplitter:
    """Write each page of a PDF as a text file or as its own PDF."""

    def __init__(
        self,
        input_path: str | Path,
        output_dir: str | Path | None = None,
        extractor: CompositePageExtractor | None = None,
    ) -> None:
        self._input_path = Path(input_path)
        self._output_dir = Path(output_dir) if output_dir else self._input_path.parent
        self._extractor = extractor or CompositePageExtractor()

    @property
    def input_path(self) -> Path:
        return self._input_path

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def extract_pages_to_text(self) -> PageExtractionSummary:
        """Write `<name>.pageNNN.txt` for every page of the input PDF.

        Pages whose extraction raises are written with a placeholder text so
        that later content analysis flags them as failed extractions.
        """
        self._ensure_input_exists()
        self._output_dir.mkdir(parents=True, exist_ok=True)

        reader = load_pdf(self._input_path)
        page_count = len(reader.pages)
        correlation_id = str(uuid4())
        LOGGER.info(
            "event=extract_text_started correlation_id=%s source=%s page_count=%s",
            correlation_id,
            self._input_path.name,
            page_count,
        )

        pages: list[ExtractedPage] = []
        for page_index in range(page_count):
            output_path = self._output_dir / (
                f"{self._input_path.name}.page{page_file_suffix(page_index)}.txt"
            )
            try:
                page_pdf = single_page_pdf_bytes(reader, page_index)
                extraction = self._extractor.extract(page_pdf)
            except Exception:
                LOGGER.warning(
                    "event=page_extraction_failed correlation_id=%s source=%s page=%s",
                    correlation_id,
                    self._input_path.name,
                    page_index + 1,
                    exc_info=True,
                )
                output_path.write_text(EXTRACTION_FAILED_PLACEHOLDER, encoding="utf-8")
                pages.append(
                    ExtractedPage(
                        page_number=page_index + 1,
                        output_path=output_path,
                        character_count=len(EXTRACTION_FAILED_PLACEHOLDER),
                        strategy=FAILED_STRATEGY,
                        extraction_failed=True,
                    )
                )
                continue

            page_text = normalize_page_text(extraction.selected.text)
            output_path.write_text(page_text, encoding="utf-8")
            pages.append(
                ExtractedPage(
                    page_number=page_index + 1,
                    output_path=output_path,
                    character_count=len(page_text),
                    strategy=extraction.selected.strategy,
                )
            )
            LOGGER.debug(
                "event=page_text_written correlation_id=%s file=%s length=%s "
                "strategy=%s used_fallback=%s",
                correlation_id,
                output_path.name,
                len(page_text),
                extraction.selected.strategy,
                extraction.used_fallback,
            )

        summary = PageExtractionSummary(
            source_path=self._input_path,
            output_dir=self._output_dir,
            pages=tuple(pages),
        )
        LOGGER.info(
            "event=extract_text_completed correlation_id=%s source=%s page_count=%s "
            "failed_pages=%s output_dir=%s",
            correlation_id,
            self._input_path.name,
            summary.page_count,
            len(summary.failed_pages),
            self._output_dir,
        )
        return summary

    def split_to_pages(self, prefix: str = "page") -> list[Path]:
        """Write `<prefix>_NNN.pdf` for every page and return the paths."""
        self._ensure_input_exists()
        self._output_dir.mkdir(parents=True, exist_ok=True)

        reader = load_pdf(self._input_path)
        written: list[Path] = []
        for page_index in range(len(reader.pages)):
            output_path = self._output_dir / f"{prefix}_{page_file_suffix(page_index)}.pdf"
            write_single_page_pdf(reader, page_index, output_path)
            written.append(output_path)

        LOGGER.info(
            "event=split_pdf_completed correlation_id=%s source=%s page_count=%s output_dir=%s",
            str(uuid4()),
            self._input_path.name,
            len(written),
            self._output_dir,
        )
        return written

    def get_info(self) -> PdfInfo:
        self._ensure_input_exists()
        reader = load_pdf(self._input_path)
        return PdfInfo(
            file_name=self._input_path.name,
            page_count=len(reader.pages),
            file_size=self._input_path.stat().st_size,
        )

    def _ensure_input_exists(self) -> None:
        if not self._input_path.is_file():
            raise InputFileNotFoundError(self._input_path)


def split_pdf(input_path: str | Path, output_dir: str | Path, prefix: str = "page") -> list[Path]:
    """Split a PDF into single-page PDFs inside output_dir."""
    return PdfPageSplitter(input_path, output_dir).split_to_pages(prefix)
