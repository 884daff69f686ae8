"""Display helpers shared by the CLI and the web UI payloads."""

from __future__ import annotations

from typing import Optional

from .models import Category

CATEGORY_LABELS: dict[str, str] = {
    Category.FUN.value: "Fun Activity",
    Category.CHORES.value: "Productive Task",
}

DURATION_LABELS: dict[str, str] = {
    "any": "Any length",
    "short": "Short (up to 15 min)",
    "standard": "Standard (15-30 min)",
    "long": "Long (30-60 min)",
    "extended": "Extended (over 1 hour)",
}

TYPE_LABELS: dict[str, str] = {"any": "Any type", **CATEGORY_LABELS}


def format_duration(minutes: float) -> str:
    """Render a duration in minutes as ``"25 min"``, ``"2 hours"`` or ``"1h 30m"``."""
    if minutes < 60:
        return f"{_trim_number(minutes)} min"
    hours, remainder = divmod(minutes, 60)
    hours = int(hours)
    if remainder == 0:
        return f"{hours} hour{'s' if hours > 1 else ''}"
    return f"{hours}h {_trim_number(remainder)}m"


def format_category(category: str) -> str:
    return CATEGORY_LABELS.get(category, category)


def format_difficulty(difficulty: Optional[str]) -> str:
    return difficulty.capitalize() if difficulty else ""


def _trim_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
