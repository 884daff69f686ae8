"""Loading of the activity catalog with a built-in fallback."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import httpx

from .models import Activity
from .paths import get_default_catalog_path
from .validation import extract_activity_records, validate_activities

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


def _fallback(
    activity_id: int, title: str, duration: int, category: str, description: str
) -> Activity:
    return Activity(
        id=activity_id, title=title, duration=duration, category=category, description=description
    )


FALLBACK_ACTIVITIES: tuple[Activity, ...] = (
    _fallback(1, "Organize your desk", 10, "chores",
              "Clear clutter and organize your workspace for better productivity"),
    _fallback(2, "Take a mindful walk", 15, "fun",
              "Step outside and enjoy a peaceful walk while being present"),
    _fallback(3, "Read a book chapter", 25, "fun",
              "Dive into your current book and read at least one chapter"),
    _fallback(4, "Do 10 minutes of stretching", 10, "fun",
              "Gentle stretches to release tension and improve flexibility"),
    _fallback(5, "Clean out your email inbox", 20, "chores",
              "Delete unnecessary emails and organize important ones"),
    _fallback(6, "Practice deep breathing", 5, "fun",
              "Take 5 minutes to focus on your breath and center yourself"),
    _fallback(7, "Water your plants", 8, "chores",
              "Check and water your indoor or outdoor plants"),
    _fallback(8, "Write in a journal", 15, "fun",
              "Reflect on your day or express your thoughts in writing"),
    _fallback(9, "Tidy up one room", 30, "chores",
              "Pick one room and spend 30 minutes making it neat and organized"),
    _fallback(10, "Learn something new online", 45, "fun",
              "Watch a tutorial or educational video on a topic that interests you"),
    _fallback(11, "Meal prep for tomorrow", 40, "chores",
              "Prepare ingredients or meals for the next day"),
    _fallback(12, "Call a friend or family member", 20, "fun",
              "Reconnect with someone you care about"),
)


class CatalogError(Exception):
    """Raised when a catalog document cannot be turned into activities."""


@dataclass(slots=True, frozen=True)
class CatalogLoadResult:
    activities: tuple[Activity, ...]
    source: str
    error: Optional[str] = None

    @property
    def used_fallback(self) -> bool:
        return self.error is not None


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def parse_catalog(text: str | bytes, source: str = "<memory>") -> tuple[Activity, ...]:
    """Decode and validate a catalog document.

    Raises :class:`CatalogError` for malformed JSON, an unexpected document
    shape, or a document without a single valid record.
    """
    try:
        document: Any = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise CatalogError(f"Malformed JSON in {source}: {exc}") from exc

    records = extract_activity_records(document)
    if records is None:
        raise CatalogError(f"Invalid activities data structure in {source}")

    activities = validate_activities(records)
    dropped = len(records) - len(activities)
    if dropped:
        logger.warning("Dropped %d invalid activity record(s) from %s", dropped, source)
    if not activities:
        raise CatalogError(f"No valid activities found in {source}")
    return tuple(activities)


def load_catalog(
    source: Optional[str] = None, *, timeout: float = DEFAULT_TIMEOUT_SECONDS
) -> CatalogLoadResult:
    """Load the catalog synchronously, falling back to the built-in list."""
    resolved = source or str(get_default_catalog_path())
    try:
        if is_url(resolved):
            with httpx.Client(timeout=timeout, follow_redirects=True) as client:
                response = client.get(resolved)
                response.raise_for_status()
                text: str | bytes = response.content
        else:
            text = Path(resolved).read_bytes()
        return _loaded(parse_catalog(text, resolved), resolved)
    except (httpx.HTTPError, OSError, CatalogError) as exc:
        return _fallback_result(resolved, exc)


async def load_catalog_async(
    source: Optional[str] = None, *, timeout: float = DEFAULT_TIMEOUT_SECONDS
) -> CatalogLoadResult:
    """Load the catalog without blocking the event loop on network fetches."""
    resolved = source or str(get_default_catalog_path())
    try:
        if is_url(resolved):
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
                response = await client.get(resolved)
                response.raise_for_status()
                text: str | bytes = response.content
        else:
            text = Path(resolved).read_bytes()
        return _loaded(parse_catalog(text, resolved), resolved)
    except (httpx.HTTPError, OSError, CatalogError) as exc:
        return _fallback_result(resolved, exc)


def _loaded(activities: tuple[Activity, ...], source: str) -> CatalogLoadResult:
    logger.info("Loaded %d activities from %s", len(activities), source)
    return CatalogLoadResult(activities=activities, source=source)


def _fallback_result(source: str, exc: Exception) -> CatalogLoadResult:
    logger.error("Failed to load activities from %s: %s", source, exc)
    logger.info("Using %d built-in fallback activities", len(FALLBACK_ACTIVITIES))
    return CatalogLoadResult(
        activities=FALLBACK_ACTIVITIES,
        source=source,
        error=_one_line(exc),
    )


def _one_line(exc: Exception) -> str:
    message = str(exc).strip().splitlines()
    return message[0] if message else exc.__class__.__name__
