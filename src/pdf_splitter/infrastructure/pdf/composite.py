"""Composite page extraction strategy with fallback selection."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pdf_splitter.infrastructure.pdf.extractors import (
    ExtractedPageText,
    PageTextExtractor,
    PdfMinerPageExtractor,
    PyPdfPageExtractor,
)
from pdf_splitter.infrastructure.pdf.quality import (
    PageExtractionQuality,
    evaluate_page_text_quality,
)

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositePageExtractionResult:
    """Selected extraction and decision metadata."""

    selected: ExtractedPageText
    selected_quality: PageExtractionQuality
    used_fallback: bool


class CompositePageExtractor:
    """Orchestrate primary/fallback extractors using quality heuristics."""

    def __init__(
        self,
        primary: PageTextExtractor | None = None,
        fallback: PageTextExtractor | None = None,
    ) -> None:
        self._primary = primary or PyPdfPageExtractor()
        self._fallback = fallback or PdfMinerPageExtractor()

    def extract(self, page_pdf: bytes) -> CompositePageExtractionResult:
        primary_result = self._primary.extract(page_pdf)
        primary_quality = evaluate_page_text_quality(primary_result.text)

        if not _should_try_fallback(primary_quality):
            return CompositePageExtractionResult(
                selected=primary_result,
                selected_quality=primary_quality,
                used_fallback=False,
            )

        try:
            fallback_result = self._fallback.extract(page_pdf)
        except Exception:
            LOGGER.warning(
                "event=fallback_extraction_failed strategy=%s",
                self._fallback.strategy_name,
                exc_info=True,
            )
            return CompositePageExtractionResult(
                selected=primary_result,
                selected_quality=primary_quality,
                used_fallback=False,
            )

        fallback_quality = evaluate_page_text_quality(fallback_result.text)
        if _prefer_fallback(primary_quality, fallback_quality):
            return CompositePageExtractionResult(
                selected=fallback_result,
                selected_quality=fallback_quality,
                used_fallback=True,
            )

        return CompositePageExtractionResult(
            selected=primary_result,
            selected_quality=primary_quality,
            used_fallback=False,
        )


def _should_try_fallback(quality: PageExtractionQuality) -> bool:
    return quality.is_empty or quality.low_text_density or quality.high_garbage_ratio


def _prefer_fallback(
    primary_quality: PageExtractionQuality,
    fallback_quality: PageExtractionQuality,
) -> bool:
    if fallback_quality.is_empty:
        return False
    if primary_quality.is_empty:
        return True
    return fallback_quality.score > primary_quality.score * 1.1
