"""Exceptions raised by splitting and analysis use-cases."""

from __future__ import annotations


class PdfSplitterError(RuntimeError):
    """Base error for pdf-splitter failures."""


class InputFileNotFoundError(PdfSplitterError):
    """Raised when an input file or directory does not exist."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Input file not found: {path}")
        self.path = path


class PdfReadError(PdfSplitterError):
    """Raised when a PDF cannot be loaded by the PDF library."""


class ContentAnalysisError(PdfSplitterError):
    """Raised when a page text file cannot be read or its marker written."""

    def __init__(self, path: object, cause: BaseException) -> None:
        super().__init__(f"Failed to analyze file {path}: {cause}")
        self.path = path


class ClassifierConfigurationError(PdfSplitterError):
    """Raised when classifier settings cannot be loaded or validated."""
