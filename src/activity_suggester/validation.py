"""Validation of untyped catalog documents into Activity records."""

from __future__ import annotations

import math
from typing import Any, Optional

from .models import CATEGORY_VALUES, DIFFICULTY_VALUES, Activity

_REQUIRED_FIELDS = ("id", "title", "duration", "type")


def extract_activity_records(document: Any) -> Optional[list[Any]]:
    """Return the raw record list of a catalog document.

    A document is either a top-level list or an object whose ``activities``
    field holds that list. Any other shape yields ``None``.
    """
    if isinstance(document, list):
        return document
    if isinstance(document, dict):
        records = document.get("activities")
        if isinstance(records, list):
            return records
    return None


def is_valid_activity(value: Any) -> bool:
    """Check a decoded record against the Activity shape without coercion."""
    if not isinstance(value, dict):
        return False
    if any(name not in value for name in _REQUIRED_FIELDS):
        return False

    if not _is_number(value["id"]):
        return False
    title = value["title"]
    if not isinstance(title, str) or not title:
        return False
    duration = value["duration"]
    if not _is_number(duration) or not _is_positive_finite(duration):
        return False
    if not isinstance(value["type"], str) or value["type"] not in CATEGORY_VALUES:
        return False

    if "description" in value and not isinstance(value["description"], str):
        return False
    if "difficulty" in value and (
        not isinstance(value["difficulty"], str)
        or value["difficulty"] not in DIFFICULTY_VALUES
    ):
        return False
    if "materials" in value:
        materials = value["materials"]
        if not isinstance(materials, list):
            return False
        if not all(isinstance(item, str) for item in materials):
            return False
    return True


def validate_activities(value: Any) -> list[Activity]:
    """Keep only the records that pass every check, in input order."""
    if not isinstance(value, list):
        return []
    return [_to_activity(record) for record in value if is_valid_activity(record)]


def _to_activity(record: dict[str, Any]) -> Activity:
    materials = record.get("materials")
    return Activity(
        id=record["id"],
        title=record["title"],
        duration=record["duration"],
        category=record["type"],
        description=record.get("description"),
        difficulty=record.get("difficulty"),
        materials=tuple(materials) if materials is not None else None,
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_positive_finite(value: float) -> bool:
    try:
        return math.isfinite(value) and value > 0
    except OverflowError:
        return False
