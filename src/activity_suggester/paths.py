"""Filesystem locations: per-user state and the files shipped with the package."""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_data_path

APP_NAME = "ActivitySuggester"

RESOURCE_DIR = Path(__file__).parent
FILTERS_FILENAME = "filters.json"


def get_state_dir() -> Path:
    """Per-user directory for remembered settings; created on first use."""
    state_dir = user_data_path(APP_NAME, appauthor=False, roaming=True, ensure_exists=True)
    return Path(state_dir)


def get_filters_path() -> Path:
    return get_state_dir() / FILTERS_FILENAME


def get_default_catalog_path() -> Path:
    return RESOURCE_DIR / "data" / "activities.json"


def get_static_dir() -> Path:
    return RESOURCE_DIR / "static"
