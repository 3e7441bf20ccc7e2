"""Smoke tests for the pdf-splitter command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pdf_splitter.presentation.cli import main
from tests.pdf_fixture_utils import write_multi_page_text_pdf


def test_cli_info_prints_page_count(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    runtime_pdf = tmp_path / "book.pdf"
    write_multi_page_text_pdf(runtime_pdf, ["Alpha", "Beta"])

    exit_code = main(["info", str(runtime_pdf)])

    output = capsys.readouterr().out
    assert exit_code == 0
    assert "File: book.pdf" in output
    assert "Pages: 2" in output
    assert "Size: 0.00 MB" in output


def test_cli_split_writes_page_text_files(tmp_path: Path) -> None:
    runtime_pdf = tmp_path / "book.pdf"
    write_multi_page_text_pdf(runtime_pdf, ["Alpha page", "Beta page"])
    output_dir = tmp_path / "out"

    exit_code = main(["split", str(runtime_pdf), "-o", str(output_dir)])

    assert exit_code == 0
    assert sorted(path.name for path in output_dir.iterdir()) == [
        "book.pdf.page001.txt",
        "book.pdf.page002.txt",
    ]


def test_cli_split_pdf_uses_prefix(tmp_path: Path) -> None:
    runtime_pdf = tmp_path / "book.pdf"
    write_multi_page_text_pdf(runtime_pdf, ["Alpha", "Beta"])
    output_dir = tmp_path / "pdfs"

    exit_code = main(["split-pdf", str(runtime_pdf), "-o", str(output_dir), "-p", "sheet"])

    assert exit_code == 0
    assert sorted(path.name for path in output_dir.iterdir()) == ["sheet_001.pdf", "sheet_002.pdf"]


def test_cli_analyze_prints_summary_and_writes_markers(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / "a.txt").write_text("", encoding="utf-8")
    (tmp_path / "b.txt").write_text(
        "Harbour seals rest on the sandbanks at low tide and return to the water at dusk.",
        encoding="utf-8",
    )

    exit_code = main(["analyze", str(tmp_path)])

    output = capsys.readouterr().out
    assert exit_code == 0
    assert "Marked: a.txt - Empty file" in output
    assert "- Total files processed: 2" in output
    assert "- Files marked as no-content: 1" in output
    assert "- Files with content: 1" in output
    assert (tmp_path / "a.no-content").exists()


def test_cli_analyze_dry_run_skips_markers(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("", encoding="utf-8")

    exit_code = main(["analyze", str(tmp_path), "--dry-run"])

    assert exit_code == 0
    assert not (tmp_path / "a.no-content").exists()


def test_cli_classify_prints_verdict_json(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    page = tmp_path / "page.txt"
    page.write_text("[Text extraction failed for this page]", encoding="utf-8")

    exit_code = main(["classify", str(page)])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["reason"] == "Text extraction failed"
    assert payload["is_non_content"] is True


def test_cli_classify_honours_config_file(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    page = tmp_path / "page.txt"
    page.write_text("short but valid", encoding="utf-8")
    config = tmp_path / "settings.json"
    config.write_text(json.dumps({"min_characters": 40}), encoding="utf-8")

    exit_code = main(["classify", str(page), "--config", str(config)])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["reason"] == "Too short (less than 10 characters)"


def test_cli_reports_missing_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["info", str(tmp_path / "missing.pdf")])

    assert exit_code == 1
    assert "Error: Input file not found" in capsys.readouterr().err


def test_cli_reports_invalid_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "settings.json"
    config.write_text(json.dumps({"unknown": 1}), encoding="utf-8")

    exit_code = main(["analyze", str(tmp_path), "--config", str(config)])

    assert exit_code == 1
    assert "Error: Invalid classifier config" in capsys.readouterr().err


def test_cli_classify_ignores_utf8_byte_order_mark(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    page = tmp_path / "page.txt"
    page.write_bytes(b"\xef\xbb\xbf")

    exit_code = main(["classify", str(page)])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["reason"] == "Empty file"
    assert payload["character_count"] == 0
