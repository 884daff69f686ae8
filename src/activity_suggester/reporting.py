"""Console rendering of suggestions and catalog statistics."""

from __future__ import annotations

from typing import Optional

from .formatting import (
    DURATION_LABELS,
    TYPE_LABELS,
    format_category,
    format_difficulty,
    format_duration,
)
from .models import Activity, FilterSelection
from .stats import ActivityStats


class ActivityPrinter:
    """Render human-readable output for the CLI."""

    def print_suggestion(
        self, activity: Optional[Activity], selection: FilterSelection, match_count: int
    ) -> None:
        print(f"Filters: {describe_filters(selection)} ({match_count} matching)")
        if activity is None:
            print("No activities match your filters. Try adjusting them.")
            return

        print("-" * 40)
        print(activity.title)
        print(f"  {format_duration(activity.duration)} - {format_category(activity.category)}")
        if activity.difficulty:
            print(f"  Difficulty: {format_difficulty(activity.difficulty)}")
        if activity.description:
            print(f"  {activity.description}")
        if activity.materials:
            print(f"  Materials: {', '.join(activity.materials)}")

    def print_stats(
        self, stats: ActivityStats, options: Optional[dict[str, dict[str, int]]] = None
    ) -> None:
        print(f"Activities: {stats.total}")
        print("-" * 40)
        print("By type:")
        for value, count in stats.by_type.items():
            print(f"  {format_category(value):<24} {count:>5}")
        print("By duration:")
        for value, count in stats.by_duration.items():
            print(f"  {DURATION_LABELS[value]:<24} {count:>5}")

        if options:
            print()
            print("Matches per filter option:")
            for value, count in options["duration"].items():
                print(f"  duration={value:<10} {count:>5}")
            for value, count in options["type"].items():
                print(f"  type={value:<14} {count:>5}")


def describe_filters(selection: FilterSelection) -> str:
    return f"{DURATION_LABELS[selection.duration]}, {TYPE_LABELS[selection.category]}"
