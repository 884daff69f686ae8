"""Configuration models and helpers for the activity suggester."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Optional

from .paths import get_default_catalog_path, get_filters_path


@dataclass(slots=True)
class AppSettings:
    """Runtime configuration shared by the web app and the CLI."""

    catalog_source: str = field(default_factory=lambda: str(get_default_catalog_path()))
    filters_path: Optional[Path] = None
    fetch_timeout: timedelta = timedelta(seconds=10)

    @classmethod
    def from_options(
        cls,
        catalog_source: Optional[str] = None,
        filters_path: Optional[Path] = None,
        fetch_timeout_seconds: Optional[float] = None,
        persist_filters: bool = True,
    ) -> "AppSettings":
        timeout = fetch_timeout_seconds if fetch_timeout_seconds is not None else 10.0
        return cls(
            catalog_source=catalog_source or str(get_default_catalog_path()),
            filters_path=(filters_path or get_filters_path()) if persist_filters else None,
            fetch_timeout=timedelta(seconds=timeout),
        )

    @property
    def timeout_seconds(self) -> float:
        return self.fetch_timeout.total_seconds()
