"""Domain models for page content classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ContentReason(StrEnum):
    """Reasons attached to a verdict; values are persisted verbatim in markers."""

    EMPTY = "Empty file"
    TOO_SHORT = "Too short (less than 10 characters)"
    EXTRACTION_FAILED = "Text extraction failed"
    TABLE_OF_CONTENTS = "Table of contents or similar metadata page"
    REPETITIVE = "Repetitive or structured content (likely not meaningful text)"
    MEANINGFUL = "Contains meaningful content"


NON_CONTENT_REASONS: frozenset[ContentReason] = frozenset(
    {
        ContentReason.EMPTY,
        ContentReason.TOO_SHORT,
        ContentReason.EXTRACTION_FAILED,
        ContentReason.TABLE_OF_CONTENTS,
        ContentReason.REPETITIVE,
    }
)


@dataclass(frozen=True)
class TextStatistics:
    """Shallow statistics of trimmed page text."""

    character_count: int
    word_count: int


@dataclass(frozen=True)
class ContentVerdict:
    """Classification result for one unit of extracted text."""

    is_empty: bool
    is_table_of_contents: bool
    is_non_content: bool
    reason: ContentReason
    character_count: int
    word_count: int

    @classmethod
    def from_reason(cls, reason: ContentReason, statistics: TextStatistics) -> ContentVerdict:
        """Build a verdict whose flags are derived from the reason."""
        return cls(
            is_empty=reason in (ContentReason.EMPTY, ContentReason.TOO_SHORT),
            is_table_of_contents=reason is ContentReason.TABLE_OF_CONTENTS,
            is_non_content=reason in NON_CONTENT_REASONS,
            reason=reason,
            character_count=statistics.character_count,
            word_count=statistics.word_count,
        )

    def as_dict(self) -> dict[str, object]:
        """Serialize verdict to plain JSON-compatible values."""
        return {
            "is_empty": self.is_empty,
            "is_table_of_contents": self.is_table_of_contents,
            "is_non_content": self.is_non_content,
            "reason": self.reason.value,
            "character_count": self.character_count,
            "word_count": self.word_count,
        }
