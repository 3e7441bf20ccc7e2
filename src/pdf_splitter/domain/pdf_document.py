"""Domain models for PDF splitting results."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

EXTRACTION_FAILED_PLACEHOLDER = "[Text extraction failed for this page]"


@dataclass(frozen=True)
class PdfInfo:
    """Basic facts about a PDF file."""

    file_name: str
    page_count: int
    file_size: int

    @property
    def size_megabytes(self) -> float:
        return self.file_size / 1024 / 1024


@dataclass(frozen=True)
class ExtractedPage:
    """One page written to disk as a text file."""

    page_number: int
    output_path: Path
    character_count: int
    strategy: str
    extraction_failed: bool = False


@dataclass(frozen=True)
class PageExtractionSummary:
    """Outcome of splitting a PDF into per-page text files."""

    source_path: Path
    output_dir: Path
    pages: tuple[ExtractedPage, ...]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def failed_pages(self) -> tuple[ExtractedPage, ...]:
        return tuple(page for page in self.pages if page.extraction_failed)


def page_file_suffix(page_index: int) -> str:
    """Return the 1-based, zero-padded page number for a 0-based index."""
    return f"{page_index + 1:03d}"
