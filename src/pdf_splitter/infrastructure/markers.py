"""Sidecar `.no-content` marker files written next to page text files."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from pdf_splitter.domain.content_analysis import ContentReason, ContentVerdict

MARKER_SUFFIX = ".no-content"

_REASON_PREFIX = "Marked as no-content: "
_CHARACTERS_PREFIX = "Character count: "
_WORDS_PREFIX = "Word count: "
_DATE_PREFIX = "Analysis date: "


@dataclass(frozen=True)
class MarkerRecord:
    """Parsed content of a marker file."""

    reason: ContentReason
    character_count: int
    word_count: int
    analyzed_at: datetime


def marker_path_for(text_path: Path) -> Path:
    return text_path.with_suffix(MARKER_SUFFIX)


def render_marker(verdict: ContentVerdict, analyzed_at: datetime) -> str:
    return "\n".join(
        (
            f"{_REASON_PREFIX}{verdict.reason.value}",
            f"{_CHARACTERS_PREFIX}{verdict.character_count}",
            f"{_WORDS_PREFIX}{verdict.word_count}",
            f"{_DATE_PREFIX}{_format_timestamp(analyzed_at)}",
        )
    )


def write_marker(text_path: Path, verdict: ContentVerdict, analyzed_at: datetime) -> Path:
    """Atomically write the marker for text_path and return its path."""
    marker_path = marker_path_for(text_path)
    content = render_marker(verdict, analyzed_at)

    handle, temp_name = tempfile.mkstemp(
        prefix=f".{marker_path.name}.",
        suffix=".tmp",
        dir=marker_path.parent,
    )
    try:
        with os.fdopen(handle, "w", encoding="utf-8") as temp_file:
            temp_file.write(content)
        os.replace(temp_name, marker_path)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise
    return marker_path


def read_marker(marker_path: Path) -> MarkerRecord:
    """Parse a marker file written by write_marker."""
    lines = marker_path.read_text(encoding="utf-8").splitlines()
    if len(lines) < 4:
        raise ValueError(f"Malformed marker file: {marker_path}")

    try:
        reason = ContentReason(_strip_prefix(lines[0], _REASON_PREFIX))
        character_count = int(_strip_prefix(lines[1], _CHARACTERS_PREFIX))
        word_count = int(_strip_prefix(lines[2], _WORDS_PREFIX))
        analyzed_at = datetime.fromisoformat(_strip_prefix(lines[3], _DATE_PREFIX))
    except ValueError as exc:
        raise ValueError(f"Malformed marker file: {marker_path}") from exc

    return MarkerRecord(
        reason=reason,
        character_count=character_count,
        word_count=word_count,
        analyzed_at=analyzed_at,
    )


def _strip_prefix(line: str, prefix: str) -> str:
    if not line.startswith(prefix):
        raise ValueError(f"Expected line starting with {prefix!r}.")
    return line[len(prefix):]


def _format_timestamp(value: datetime) -> str:
    # Naive values are taken as UTC. Output: 2024-01-01T12:00:00.000Z
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
