"""pdf-splitter CLI: split, split-pdf, info, analyze and classify commands.

Usage:
    pdf-splitter split <input.pdf> [-o DIR]
    pdf-splitter split-pdf <input.pdf> [-o DIR] [-p PREFIX]
    pdf-splitter info <input.pdf>
    pdf-splitter analyze <directory> [--dry-run] [--config FILE]
    pdf-splitter classify <page.txt> [--config FILE]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pdf_splitter.application.analyze_directory_use_case import (
    AnalyzeDirectoryCommand,
    AnalyzeDirectoryUseCase,
)
from pdf_splitter.application.content_classifier import TextContentClassifier
from pdf_splitter.application.errors import (
    ContentAnalysisError,
    InputFileNotFoundError,
    PdfSplitterError,
)
from pdf_splitter.application.page_splitter import PdfPageSplitter, split_pdf
from pdf_splitter.infrastructure.config import (
    DEFAULT_PAGE_PREFIX,
    DEFAULT_SPLIT_OUTPUT_DIR,
    load_classifier_settings,
    resolve_progress_interval,
)
from pdf_splitter.infrastructure.logging_config import configure_logging

LOGGER = logging.getLogger(__name__)

VERSION = "1.0.0"


def _cmd_split(args: argparse.Namespace) -> int:
    splitter = PdfPageSplitter(args.input, args.output)
    summary = splitter.extract_pages_to_text()
    for page in summary.pages:
        if page.extraction_failed:
            print(f"Created: {page.output_path.name} (extraction failed)")
        else:
            print(f"Created: {page.output_path.name} ({page.character_count} characters)")
    print(f"Text extraction completed. Files saved to: {summary.output_dir}")
    return 0


def _cmd_split_pdf(args: argparse.Namespace) -> int:
    written = split_pdf(args.input, args.output, args.prefix)
    for path in written:
        print(f"Created: {path.name}")
    print("PDF splitting completed successfully!")
    return 0


def _cmd_info(args: argparse.Namespace) -> int:
    info = PdfPageSplitter(args.input).get_info()
    print(f"File: {info.file_name}")
    print(f"Pages: {info.page_count}")
    print(f"Size: {info.size_megabytes:.2f} MB")
    return 0


def _cmd_analyze(args: argparse.Namespace) -> int:
    directory = Path(args.directory).resolve()
    settings = load_classifier_settings(args.config)
    use_case = AnalyzeDirectoryUseCase(TextContentClassifier(settings))

    print(f"Analyzing content in: {directory}")
    summary = use_case.execute(
        AnalyzeDirectoryCommand(
            directory=directory,
            dry_run=args.dry_run,
            progress_interval=resolve_progress_interval(),
        )
    )
    for result in summary.results:
        if result.verdict.is_non_content:
            print(f"Marked: {result.text_path.name} - {result.verdict.reason.value}")

    print()
    print("Analysis complete:")
    print(f"- Total files processed: {summary.total}")
    print(f"- Files marked as no-content: {summary.marked}")
    print(f"- Files with content: {summary.with_content}")
    return 0


def _cmd_classify(args: argparse.Namespace) -> int:
    text_path = Path(args.file)
    if not text_path.is_file():
        raise InputFileNotFoundError(text_path)
    classifier = TextContentClassifier(load_classifier_settings(args.config))
    try:
        content = text_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise ContentAnalysisError(text_path, exc) from exc
    verdict = classifier.classify(content)
    print(json.dumps(verdict.as_dict(), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdf-splitter",
        description="Extract text from PDF files page by page and flag non-content pages",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_split = subparsers.add_parser(
        "split",
        help="Extract text from each page of a PDF file into separate text files",
    )
    p_split.add_argument("input", help="Input PDF file path")
    p_split.add_argument(
        "-o",
        "--output",
        metavar="DIR",
        help="Output directory (defaults to same directory as input file)",
    )
    p_split.set_defaults(handler=_cmd_split)

    p_split_pdf = subparsers.add_parser("split-pdf", help="Split a PDF file into separate PDF pages")
    p_split_pdf.add_argument("input", help="Input PDF file path")
    p_split_pdf.add_argument(
        "-o",
        "--output",
        metavar="DIR",
        default=DEFAULT_SPLIT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_SPLIT_OUTPUT_DIR})",
    )
    p_split_pdf.add_argument(
        "-p",
        "--prefix",
        default=DEFAULT_PAGE_PREFIX,
        help=f"Output file prefix (default: {DEFAULT_PAGE_PREFIX})",
    )
    p_split_pdf.set_defaults(handler=_cmd_split_pdf)

    p_info = subparsers.add_parser("info", help="Show information about a PDF file")
    p_info.add_argument("input", help="Input PDF file path")
    p_info.set_defaults(handler=_cmd_info)

    p_analyze = subparsers.add_parser(
        "analyze",
        help="Create .no-content marker files for empty, TOC, or non-content page files",
    )
    p_analyze.add_argument("directory", help="Directory containing page .txt files")
    p_analyze.add_argument("--dry-run", action="store_true", help="Classify without writing markers")
    p_analyze.add_argument("--config", type=Path, metavar="FILE", help="Classifier settings JSON")
    p_analyze.set_defaults(handler=_cmd_analyze)

    p_classify = subparsers.add_parser("classify", help="Print the verdict for one text file")
    p_classify.add_argument("file", help="Page text file path")
    p_classify.add_argument("--config", type=Path, metavar="FILE", help="Classifier settings JSON")
    p_classify.set_defaults(handler=_cmd_classify)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        return args.handler(args)
    except PdfSplitterError as exc:
        LOGGER.debug("event=command_failed command=%s", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
