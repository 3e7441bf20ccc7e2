"""Utilities for building lightweight runtime PDF fixtures."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


def write_simple_text_pdf(path: Path, text: str) -> None:
    """Write a minimal one-page PDF with plain text content."""
    write_multi_page_text_pdf(path, [text])


def write_multi_page_text_pdf(path: Path, page_texts: Sequence[str]) -> None:
    """Write a minimal PDF with one line of Helvetica text per page."""
    page_count = len(page_texts)
    font_ref = 3
    page_refs = [4 + 2 * index for index in range(page_count)]

    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        (
            f"<< /Type /Pages /Kids [{' '.join(f'{ref} 0 R' for ref in page_refs)}] "
            f"/Count {page_count} >>"
        ).encode("ascii"),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for page_ref, text in zip(page_refs, page_texts, strict=True):
        stream = _text_stream(text)
        objects.append(
            (
                f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 {font_ref} 0 R >> >> "
                f"/Contents {page_ref + 1} 0 R >>"
            ).encode("ascii")
        )
        objects.append(
            f"<< /Length {len(stream)} >>\nstream\n".encode("ascii")
            + stream
            + b"\nendstream"
        )

    pdf_parts: list[bytes] = [b"%PDF-1.4\n"]
    offsets: list[int] = []

    for index, obj in enumerate(objects, start=1):
        offsets.append(sum(len(part) for part in pdf_parts))
        pdf_parts.append(f"{index} 0 obj\n".encode("ascii"))
        pdf_parts.append(obj + b"\n")
        pdf_parts.append(b"endobj\n")

    xref_offset = sum(len(part) for part in pdf_parts)
    pdf_parts.append(f"xref\n0 {len(objects) + 1}\n".encode("ascii"))
    pdf_parts.append(b"0000000000 65535 f \n")
    for offset in offsets:
        pdf_parts.append(f"{offset:010d} 00000 n \n".encode("ascii"))

    pdf_parts.append(f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n".encode("ascii"))
    pdf_parts.append(f"startxref\n{xref_offset}\n%%EOF\n".encode("ascii"))

    path.write_bytes(b"".join(pdf_parts))


def _text_stream(text: str) -> bytes:
    escaped_text = (
        text.replace("\\", "\\\\")
        .replace("(", "\\(")
        .replace(")", "\\)")
    )
    return f"BT /F1 14 Tf 72 720 Td ({escaped_text}) Tj ET".encode("latin-1", errors="replace")
