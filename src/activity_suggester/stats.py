"""Informational counts over a catalog or a filtered subset."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable

from .filters import apply_filters, duration_bucket_for
from .models import (
    BUCKET_VALUES,
    CATEGORY_SELECTORS,
    CATEGORY_VALUES,
    DURATION_SELECTORS,
    Activity,
    FilterSelection,
)


@dataclass(slots=True)
class ActivityStats:
    total: int
    by_type: dict[str, int]
    by_duration: dict[str, int]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "by_type": dict(self.by_type),
            "by_duration": dict(self.by_duration),
        }


def compute_stats(activities: Iterable[Activity]) -> ActivityStats:
    """Count activities per category and per duration bucket."""
    total = 0
    by_type = {value: 0 for value in CATEGORY_VALUES}
    by_duration = {value: 0 for value in BUCKET_VALUES}
    for activity in activities:
        total += 1
        if activity.category in by_type:
            by_type[activity.category] += 1
        bucket = duration_bucket_for(activity.duration)
        if bucket is not None:
            by_duration[bucket.value] += 1
    return ActivityStats(total=total, by_type=by_type, by_duration=by_duration)


def option_counts(activities: Iterable[Activity]) -> Dict[str, Dict[str, int]]:
    """Number of matches each individual filter option would produce."""
    catalog = list(activities)
    return {
        "duration": {
            selector: len(apply_filters(catalog, FilterSelection(duration=selector)))
            for selector in DURATION_SELECTORS
        },
        "type": {
            selector: len(apply_filters(catalog, FilterSelection(category=selector)))
            for selector in CATEGORY_SELECTORS
        },
    }
