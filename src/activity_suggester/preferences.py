"""Best-effort persistence of the filter selection in a local JSON store."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .models import DEFAULT_FILTERS, FilterSelection

logger = logging.getLogger(__name__)

STORAGE_KEY = "activityai-filters"


class FilterStore:
    """A tiny key-value file holding the persisted filter selection."""

    def __init__(self, path: Path, key: str = STORAGE_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def load(self) -> FilterSelection:
        """Return the stored selection, or the defaults when none is usable."""
        entries = self._read_entries()
        if self.key not in entries:
            return DEFAULT_FILTERS
        try:
            return FilterSelection.from_mapping(entries[self.key])
        except ValueError as exc:
            logger.warning("Ignoring stored filters in %s: %s", self.path, exc)
            return DEFAULT_FILTERS

    def save(self, selection: FilterSelection) -> None:
        entries = self._read_entries()
        entries[self.key] = selection.to_dict()
        self._write_entries(entries)

    def clear(self) -> None:
        entries = self._read_entries()
        if entries.pop(self.key, None) is not None:
            self._write_entries(entries)

    def _read_entries(self) -> dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            logger.warning("Failed to read filter store %s: %s", self.path, exc)
            return {}
        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            logger.warning("Filter store %s is corrupt: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Filter store %s does not hold an object", self.path)
            return {}
        return data

    def _write_entries(self, entries: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(entries, indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("Failed to save filters to %s: %s", self.path, exc)
