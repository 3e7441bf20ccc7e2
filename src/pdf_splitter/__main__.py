"""Application entrypoint."""

from __future__ import annotations

import logging
import sys
from uuid import uuid4

from pdf_splitter.presentation.cli import main as cli_main

LOGGER = logging.getLogger(__name__)


def main() -> int:
    """Run the command-line tool."""
    try:
        return cli_main(sys.argv[1:])
    except Exception:
        correlation_id = str(uuid4())
        LOGGER.exception("event=cli_failed correlation_id=%s", correlation_id)
        print(f"Unexpected error. correlation_id={correlation_id}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
