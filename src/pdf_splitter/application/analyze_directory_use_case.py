"""Application use-case for classifying a directory of page text files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from uuid import uuid4

from pdf_splitter.application.content_classifier import TextContentClassifier
from pdf_splitter.application.errors import ContentAnalysisError, InputFileNotFoundError
from pdf_splitter.domain.content_analysis import ContentVerdict
from pdf_splitter.infrastructure.config import DEFAULT_PROGRESS_INTERVAL
from pdf_splitter.infrastructure.markers import write_marker

LOGGER = logging.getLogger(__name__)

TEXT_FILE_PATTERN = "*.txt"


@dataclass(frozen=True)
class AnalyzeDirectoryCommand:
    """Input contract for analyzing page text files in one directory."""

    directory: str | Path
    dry_run: bool = False
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL
    analyzed_at: datetime | None = None


@dataclass(frozen=True)
class FileAnalysisResult:
    """Verdict for one text file and the marker written for it, if any."""

    text_path: Path
    verdict: ContentVerdict
    marker_path: Path | None


@dataclass(frozen=True)
class DirectoryAnalysisSummary:
    """Totals for one directory analysis run."""

    directory: Path
    results: tuple[FileAnalysisResult, ...]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def marked(self) -> int:
        return sum(1 for result in self.results if result.verdict.is_non_content)

    @property
    def with_content(self) -> int:
        return self.total - self.marked


class AnalyzeDirectoryUseCase:
    """Classify every page text file and mark non-content pages."""

    def __init__(self, classifier: TextContentClassifier | None = None) -> None:
        self._classifier = classifier or TextContentClassifier()

    def execute(self, command: AnalyzeDirectoryCommand) -> DirectoryAnalysisSummary:
        directory = Path(command.directory)
        if not directory.is_dir():
            raise InputFileNotFoundError(directory)
        if command.progress_interval < 1:
            raise ValueError("Progress interval must be positive.")

        text_files = sorted(path for path in directory.glob(TEXT_FILE_PATTERN) if path.is_file())
        analyzed_at = command.analyzed_at or datetime.now(tz=UTC)
        correlation_id = str(uuid4())
        LOGGER.info(
            "event=analyze_started correlation_id=%s directory=%s file_count=%s dry_run=%s",
            correlation_id,
            directory,
            len(text_files),
            command.dry_run,
        )

        results: list[FileAnalysisResult] = []
        for processed, text_path in enumerate(text_files, start=1):
            result = self._analyze_file(text_path, analyzed_at, dry_run=command.dry_run)
            results.append(result)
            if result.verdict.is_non_content:
                LOGGER.info(
                    "event=file_marked correlation_id=%s file=%s reason=%r",
                    correlation_id,
                    text_path.name,
                    result.verdict.reason.value,
                )
            if processed % command.progress_interval == 0:
                LOGGER.info(
                    "event=analyze_progress correlation_id=%s processed=%s total=%s",
                    correlation_id,
                    processed,
                    len(text_files),
                )

        summary = DirectoryAnalysisSummary(directory=directory, results=tuple(results))
        LOGGER.info(
            "event=analyze_completed correlation_id=%s total=%s marked=%s with_content=%s",
            correlation_id,
            summary.total,
            summary.marked,
            summary.with_content,
        )
        return summary

    def _analyze_file(
        self,
        text_path: Path,
        analyzed_at: datetime,
        *,
        dry_run: bool,
    ) -> FileAnalysisResult:
        try:
            content = text_path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise ContentAnalysisError(text_path, exc) from exc

        verdict = self._classifier.classify(content)
        if not verdict.is_non_content or dry_run:
            return FileAnalysisResult(text_path=text_path, verdict=verdict, marker_path=None)

        try:
            marker_path = write_marker(text_path, verdict, analyzed_at)
        except OSError as exc:
            raise ContentAnalysisError(text_path, exc) from exc
        return FileAnalysisResult(text_path=text_path, verdict=verdict, marker_path=marker_path)
