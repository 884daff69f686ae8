"""Shared fixtures for the activity suggester tests."""

import json

import pytest

from activity_suggester.models import Activity


def make_activity(activity_id, duration, category="fun", title=None, **extra):
    return Activity(
        id=activity_id,
        title=title or f"Activity {activity_id}",
        duration=duration,
        category=category,
        **extra,
    )


@pytest.fixture
def activity_factory():
    return make_activity


@pytest.fixture
def sample_catalog():
    """Four activities covering every bucket except standard."""
    return [
        make_activity(1, 10, "fun"),
        make_activity(2, 45, "fun"),
        make_activity(3, 15, "chores"),
        make_activity(4, 90, "fun"),
    ]


@pytest.fixture
def catalog_records():
    return [
        {"id": 1, "title": "Stretch", "duration": 10, "type": "fun"},
        {"id": 2, "title": "Read", "duration": 45, "type": "fun", "difficulty": "easy"},
        {"id": 3, "title": "Dishes", "duration": 15, "type": "chores", "materials": ["Sponge"]},
        {"id": 4, "title": "Hike", "duration": 90, "type": "fun", "description": "Go outside"},
    ]


@pytest.fixture
def catalog_file(tmp_path, catalog_records):
    path = tmp_path / "activities.json"
    path.write_text(json.dumps({"activities": catalog_records}), encoding="utf-8")
    return path
