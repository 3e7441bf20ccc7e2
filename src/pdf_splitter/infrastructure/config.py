"""Configuration helpers for classifier settings and batch analysis."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import ValidationError

from pdf_splitter.application.classifier_settings import ClassifierSettings
from pdf_splitter.application.errors import ClassifierConfigurationError

CLASSIFIER_CONFIG_ENV_VAR = "PDF_SPLITTER_CLASSIFIER_CONFIG"
PROGRESS_INTERVAL_ENV_VAR = "PDF_SPLITTER_PROGRESS_INTERVAL"
DEFAULT_PROGRESS_INTERVAL = 50
DEFAULT_SPLIT_OUTPUT_DIR = "./output"
DEFAULT_PAGE_PREFIX = "page"


def load_classifier_settings(config_path: Path | None = None) -> ClassifierSettings:
    """Load settings from a JSON file, the env-configured file, or defaults."""
    resolved_path = config_path or _resolve_path(CLASSIFIER_CONFIG_ENV_VAR)
    if resolved_path is None:
        return ClassifierSettings()

    try:
        raw_json = resolved_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ClassifierConfigurationError(
            f"Could not read classifier config {resolved_path}: {exc}"
        ) from exc

    try:
        return ClassifierSettings.model_validate_json(raw_json)
    except ValidationError as exc:
        raise ClassifierConfigurationError(
            f"Invalid classifier config {resolved_path}: {exc}"
        ) from exc


def resolve_progress_interval() -> int:
    """Return how many files are analyzed between progress log lines."""
    raw_value = os.environ.get(PROGRESS_INTERVAL_ENV_VAR, "").strip()
    if not raw_value:
        return DEFAULT_PROGRESS_INTERVAL
    try:
        interval = int(raw_value)
    except ValueError as exc:
        raise ClassifierConfigurationError(
            f"{PROGRESS_INTERVAL_ENV_VAR} must be an integer, got {raw_value!r}."
        ) from exc
    if interval < 1:
        raise ClassifierConfigurationError(
            f"{PROGRESS_INTERVAL_ENV_VAR} must be positive, got {interval}."
        )
    return interval


def _resolve_path(env_var: str) -> Path | None:
    raw_value = os.environ.get(env_var, "").strip()
    return Path(raw_value).expanduser() if raw_value else None
