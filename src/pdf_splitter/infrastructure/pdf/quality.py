"""Quality heuristics for text extracted from one PDF page."""

from __future__ import annotations

from dataclasses import dataclass

MIN_PAGE_CHARACTERS = 60
MAX_GARBAGE_RATIO = 0.2


@dataclass(frozen=True)
class PageExtractionQuality:
    """Heuristic quality assessment for extracted page text."""

    score: float
    text_length: int
    garbage_ratio: float
    is_empty: bool
    low_text_density: bool
    high_garbage_ratio: bool


def evaluate_page_text_quality(text: str) -> PageExtractionQuality:
    """Evaluate extraction quality using lightweight deterministic heuristics."""
    stripped = text.strip()
    text_length = len(stripped)
    is_empty = text_length == 0

    non_whitespace = [char for char in stripped if not char.isspace()]
    garbage_count = sum(
        1
        for char in non_whitespace
        if (not char.isprintable()) or char == "\ufffd"
    )
    garbage_ratio = garbage_count / len(non_whitespace) if non_whitespace else 1.0

    penalty = garbage_ratio * 100
    score = 0.0 if is_empty else max(text_length - penalty, 0.0)

    return PageExtractionQuality(
        score=score,
        text_length=text_length,
        garbage_ratio=garbage_ratio,
        is_empty=is_empty,
        low_text_density=text_length < MIN_PAGE_CHARACTERS,
        high_garbage_ratio=garbage_ratio > MAX_GARBAGE_RATIO,
    )
