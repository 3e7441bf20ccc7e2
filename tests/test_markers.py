"""Tests for `.no-content` marker files."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone
from pathlib import Path

import pytest

from pdf_splitter.application.content_classifier import classify_text
from pdf_splitter.domain.content_analysis import ContentReason
from pdf_splitter.infrastructure.markers import (
    marker_path_for,
    read_marker,
    render_marker,
    write_marker,
)

ANALYZED_AT = datetime(2024, 3, 1, 12, 30, 0, tzinfo=UTC)


def test_marker_path_replaces_text_suffix() -> None:
    assert marker_path_for(Path("out/book.pdf.page001.txt")) == Path(
        "out/book.pdf.page001.no-content"
    )


def test_render_marker_uses_documented_layout() -> None:
    verdict = classify_text("[Text extraction failed for this page]")

    content = render_marker(verdict, ANALYZED_AT)

    assert content == (
        "Marked as no-content: Text extraction failed\n"
        "Character count: 38\n"
        "Word count: 6\n"
        "Analysis date: 2024-03-01T12:30:00.000Z"
    )


def test_write_marker_creates_sidecar_and_reads_back(tmp_path: Path) -> None:
    text_path = tmp_path / "book.pdf.page002.txt"
    text_path.write_text("", encoding="utf-8")
    verdict = classify_text("")

    marker_path = write_marker(text_path, verdict, ANALYZED_AT)

    assert marker_path == tmp_path / "book.pdf.page002.no-content"
    record = read_marker(marker_path)
    assert record.reason is ContentReason.EMPTY
    assert record.character_count == 0
    assert record.word_count == 0
    assert record.analyzed_at == ANALYZED_AT
    assert sorted(path.name for path in tmp_path.iterdir()) == [
        "book.pdf.page002.no-content",
        "book.pdf.page002.txt",
    ]


def test_read_marker_rejects_malformed_file(tmp_path: Path) -> None:
    marker_path = tmp_path / "broken.no-content"
    marker_path.write_text("Marked as no-content: Something else\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Malformed marker file"):
        read_marker(marker_path)


def test_render_marker_converts_offset_timestamp_to_utc() -> None:
    verdict = classify_text("")
    analyzed_at = datetime(2024, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))

    content = render_marker(verdict, analyzed_at)

    assert content.endswith("Analysis date: 2024-01-01T10:00:00.000Z")


def test_render_marker_treats_naive_timestamp_as_utc() -> None:
    verdict = classify_text("")

    content = render_marker(verdict, datetime(2024, 1, 1, 12, 0))

    assert content.endswith("Analysis date: 2024-01-01T12:00:00.000Z")
