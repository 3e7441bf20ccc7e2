"""Heuristic classifier separating page content from non-content pages.

Rules run in a fixed priority order and the first one that fires decides the
verdict:

1. emptiness (no text, or fewer than ``min_characters``),
2. extraction-failure markers left by the splitter,
3. table-of-contents / front-matter signals,
4. repetitive or columnar line statistics.

Text that passes every rule is reported as meaningful content.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from pdf_splitter.application.classifier_settings import ClassifierSettings
from pdf_splitter.domain.content_analysis import ContentReason, ContentVerdict, TextStatistics

_CHAPTER_REFERENCE_PATTERN = re.compile(r"chapter\s+\d+", re.IGNORECASE)
_PAGE_REFERENCE_PATTERN = re.compile(r"page\s+\d+", re.IGNORECASE)


@dataclass(frozen=True)
class _Rule:
    reason: ContentReason
    matches: Callable[[str], bool]


def measure_text(text: str) -> TextStatistics:
    """Return character and word counts of trimmed text."""
    trimmed = text.strip()
    return TextStatistics(character_count=len(trimmed), word_count=len(trimmed.split()))


def split_nonblank_lines(text: str) -> list[str]:
    """Split text into trimmed lines, dropping blank ones."""
    lines = (line.strip() for line in text.split("\n"))
    return [line for line in lines if line]


class TextContentClassifier:
    """Pure, stateless classifier for one page of extracted text."""

    def __init__(self, settings: ClassifierSettings | None = None) -> None:
        self._settings = settings or ClassifierSettings()
        self._rules: Sequence[_Rule] = (
            _Rule(ContentReason.EXTRACTION_FAILED, self.has_extraction_failure_marker),
            _Rule(ContentReason.TABLE_OF_CONTENTS, self.is_table_of_contents),
            _Rule(ContentReason.REPETITIVE, self.is_repetitive),
        )

    @property
    def settings(self) -> ClassifierSettings:
        return self._settings

    def classify(self, text: str) -> ContentVerdict:
        """Classify text and return a verdict with exactly one reason."""
        trimmed = text.strip()
        statistics = measure_text(trimmed)

        if statistics.character_count == 0:
            return ContentVerdict.from_reason(ContentReason.EMPTY, statistics)
        if statistics.character_count < self._settings.min_characters:
            return ContentVerdict.from_reason(ContentReason.TOO_SHORT, statistics)

        for rule in self._rules:
            if rule.matches(trimmed):
                return ContentVerdict.from_reason(rule.reason, statistics)

        return ContentVerdict.from_reason(ContentReason.MEANINGFUL, statistics)

    def has_extraction_failure_marker(self, text: str) -> bool:
        lowered = text.lower()
        return any(marker in lowered for marker in self._settings.extraction_failure_markers)

    def count_keyword_matches(self, text: str) -> int:
        """Count distinct front-matter keywords occurring anywhere in text."""
        lowered = text.lower()
        return sum(1 for keyword in self._settings.toc_keywords if keyword in lowered)

    def is_table_of_contents(self, text: str) -> bool:
        settings = self._settings
        keyword_matches = self.count_keyword_matches(text)
        if keyword_matches >= settings.min_keyword_matches:
            return True

        chapter_references = len(_CHAPTER_REFERENCE_PATTERN.findall(text))
        page_references = len(_PAGE_REFERENCE_PATTERN.findall(text))
        if (
            chapter_references >= settings.min_reference_matches
            or page_references >= settings.min_reference_matches
        ):
            return True

        # Mostly short lines only count together with at least one keyword.
        lines = split_nonblank_lines(text)
        if len(lines) >= settings.min_toc_lines:
            short_lines = sum(1 for line in lines if len(line) < settings.short_line_length)
            if (
                short_lines / len(lines) > settings.short_line_ratio
                and keyword_matches >= settings.min_short_line_keyword_matches
            ):
                return True

        return False

    def is_repetitive(self, text: str) -> bool:
        settings = self._settings
        lines = split_nonblank_lines(text)
        if len(lines) < settings.min_repetition_lines:
            return False

        if len(set(lines)) / len(lines) < settings.min_unique_line_ratio:
            return True

        mean_length = sum(len(line) for line in lines) / len(lines)
        return (
            mean_length < settings.max_mean_line_length
            and len(lines) > settings.min_structured_lines
        )


_DEFAULT_CLASSIFIER = TextContentClassifier()


def classify_text(text: str) -> ContentVerdict:
    """Classify text with default settings."""
    return _DEFAULT_CLASSIFIER.classify(text)
