"""Domain models for suggestable activities and filter selections."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


ANY = "any"


class Category(str, Enum):
    FUN = "fun"
    CHORES = "chores"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class DurationBucket(str, Enum):
    """Named duration ranges; each upper bound is inclusive."""

    SHORT = "short"
    STANDARD = "standard"
    LONG = "long"
    EXTENDED = "extended"


CATEGORY_VALUES: tuple[str, ...] = tuple(item.value for item in Category)
DIFFICULTY_VALUES: tuple[str, ...] = tuple(item.value for item in Difficulty)
BUCKET_VALUES: tuple[str, ...] = tuple(item.value for item in DurationBucket)

DURATION_SELECTORS: tuple[str, ...] = (ANY, *BUCKET_VALUES)
CATEGORY_SELECTORS: tuple[str, ...] = (ANY, *CATEGORY_VALUES)


@dataclass(slots=True, frozen=True)
class Activity:
    """A single suggestable item with a duration in minutes and a category."""

    id: float
    title: str
    duration: float
    category: str
    description: Optional[str] = None
    difficulty: Optional[str] = None
    materials: Optional[tuple[str, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "duration": self.duration,
            "type": self.category,
        }
        if self.description is not None:
            payload["description"] = self.description
        if self.difficulty is not None:
            payload["difficulty"] = self.difficulty
        if self.materials is not None:
            payload["materials"] = list(self.materials)
        return payload


@dataclass(slots=True, frozen=True)
class FilterSelection:
    """The user's duration bucket and category constraints."""

    duration: str = ANY
    category: str = ANY

    def __post_init__(self) -> None:
        if self.duration not in DURATION_SELECTORS:
            raise ValueError(
                f"duration must be one of {', '.join(DURATION_SELECTORS)}; got {self.duration!r}"
            )
        if self.category not in CATEGORY_SELECTORS:
            raise ValueError(
                f"type must be one of {', '.join(CATEGORY_SELECTORS)}; got {self.category!r}"
            )

    @classmethod
    def from_mapping(cls, data: Any) -> "FilterSelection":
        """Build a selection from a ``{"duration": ..., "type": ...}`` mapping."""
        if not isinstance(data, dict):
            raise ValueError("filter selection must be an object")
        if "duration" not in data or "type" not in data:
            raise ValueError("filter selection requires 'duration' and 'type'")
        return cls(duration=data["duration"], category=data["type"])

    def replace(
        self, *, duration: Optional[str] = None, category: Optional[str] = None
    ) -> "FilterSelection":
        return FilterSelection(
            duration=self.duration if duration is None else duration,
            category=self.category if category is None else category,
        )

    @property
    def is_default(self) -> bool:
        return self.duration == ANY and self.category == ANY

    def to_dict(self) -> Dict[str, str]:
        return {"duration": self.duration, "type": self.category}


DEFAULT_FILTERS = FilterSelection()
