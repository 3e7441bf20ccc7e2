"""Text normalization helpers for extracted page text."""

from __future__ import annotations

import re

_MULTISPACE_PATTERN = re.compile(r" {2,}")


def normalize_page_text(raw_text: str) -> str:
    """Replace tabs with spaces, collapse space runs and trim the page text.

    Line breaks are preserved so line-based heuristics still see the page layout.
    """
    without_tabs = raw_text.replace("\t", " ")
    return _MULTISPACE_PATTERN.sub(" ", without_tabs).strip()
