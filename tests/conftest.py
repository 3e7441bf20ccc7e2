"""Shared pytest fixtures for CLI and analysis tests."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host configuration from leaking into tests."""
    monkeypatch.delenv("PDF_SPLITTER_CLASSIFIER_CONFIG", raising=False)
    monkeypatch.delenv("PDF_SPLITTER_PROGRESS_INTERVAL", raising=False)


@pytest.fixture(autouse=True)
def _reset_log_level() -> None:
    """Undo root level changes made by CLI runs."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    root_logger.setLevel(level)
