"""Tunable keyword lists and thresholds for the content classifier."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_TOC_KEYWORDS: tuple[str, ...] = (
    "table of contents",
    "contents",
    "chapter",
    "part 1",
    "part 2",
    "part 3",
    "index",
    "acknowledgements",
    "dedication",
    "preface",
    "introduction",
    "foreword",
    "copyright",
    "title page",
    "about the author",
)

DEFAULT_EXTRACTION_FAILURE_MARKERS: tuple[str, ...] = (
    "[text extraction failed for this page]",
    "extraction failed",
    "could not extract text",
)


class ClassifierSettings(BaseModel):
    """Static configuration of the rule chain."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    toc_keywords: tuple[str, ...] = Field(default=DEFAULT_TOC_KEYWORDS, min_length=1)
    extraction_failure_markers: tuple[str, ...] = Field(
        default=DEFAULT_EXTRACTION_FAILURE_MARKERS,
        min_length=1,
    )

    min_characters: int = Field(default=10, ge=1)

    min_keyword_matches: int = Field(default=2, ge=1)
    min_reference_matches: int = Field(default=2, ge=1)
    min_toc_lines: int = Field(default=3, ge=1)
    short_line_length: int = Field(default=50, ge=1)
    short_line_ratio: float = Field(default=0.7, ge=0.0, le=1.0)
    min_short_line_keyword_matches: int = Field(default=1, ge=0)

    min_repetition_lines: int = Field(default=3, ge=1)
    min_unique_line_ratio: float = Field(default=0.3, ge=0.0, le=1.0)
    max_mean_line_length: float = Field(default=15.0, gt=0.0)
    min_structured_lines: int = Field(default=5, ge=0)

    @field_validator("toc_keywords", "extraction_failure_markers")
    @classmethod
    def lowercase_phrases(cls, phrases: tuple[str, ...]) -> tuple[str, ...]:
        cleaned = tuple(phrase.strip().lower() for phrase in phrases)
        if any(not phrase for phrase in cleaned):
            raise ValueError("Keyword and marker phrases must not be blank.")
        return tuple(dict.fromkeys(cleaned))

    @model_validator(mode="after")
    def validate_keyword_thresholds(self) -> ClassifierSettings:
        if self.min_keyword_matches > len(self.toc_keywords):
            raise ValueError(
                "min_keyword_matches cannot exceed the number of TOC keywords."
            )
        return self
