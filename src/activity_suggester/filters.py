"""Filter predicates and the filtering engine over activity lists."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from .models import (
    ANY,
    CATEGORY_SELECTORS,
    DURATION_SELECTORS,
    Activity,
    DurationBucket,
    FilterSelection,
)

Predicate = Callable[[Activity], bool]


def duration_bucket_for(duration: float) -> Optional[DurationBucket]:
    """Return the bucket containing ``duration``; ``None`` below one minute."""
    if duration < 1:
        return None
    if duration <= 15:
        return DurationBucket.SHORT
    if duration <= 30:
        return DurationBucket.STANDARD
    if duration <= 60:
        return DurationBucket.LONG
    return DurationBucket.EXTENDED


def duration_predicate(selector: str) -> Predicate:
    if selector not in DURATION_SELECTORS:
        raise ValueError(f"Unknown duration filter: {selector!r}")
    if selector == ANY:
        return _match_all
    bucket = DurationBucket(selector)
    return lambda activity: duration_bucket_for(activity.duration) is bucket


def category_predicate(selector: str) -> Predicate:
    if selector not in CATEGORY_SELECTORS:
        raise ValueError(f"Unknown activity type filter: {selector!r}")
    if selector == ANY:
        return _match_all
    return lambda activity: activity.category == selector


def build_predicate(selection: FilterSelection) -> Predicate:
    """Combine the duration and category constraints with logical AND."""
    by_duration = duration_predicate(selection.duration)
    by_category = category_predicate(selection.category)
    return lambda activity: by_duration(activity) and by_category(activity)


def apply_filters(
    activities: Iterable[Activity], selection: FilterSelection
) -> list[Activity]:
    """Return a new list of the activities matching ``selection``, order kept."""
    predicate = build_predicate(selection)
    return [activity for activity in activities if predicate(activity)]


def _match_all(activity: Activity) -> bool:
    return True
