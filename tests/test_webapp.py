"""
API tests for the FastAPI application.
"""

import json

import pytest
from fastapi.testclient import TestClient

from activity_suggester.catalog import FALLBACK_ACTIVITIES
from activity_suggester.config import AppSettings
from activity_suggester.webapp import NO_MATCH_MESSAGE, create_app


@pytest.fixture
def filters_path(tmp_path):
    return tmp_path / "filters.json"


@pytest.fixture
def client(catalog_file, filters_path):
    settings = AppSettings(catalog_source=str(catalog_file), filters_path=filters_path)
    app = create_app(settings=settings, random_source=lambda: 0.0)
    with TestClient(app) as test_client:
        yield test_client


class TestStatus:
    def test_catalog_is_loaded_on_startup(self, client, catalog_file):
        data = client.get("/api/status").json()

        assert data["loaded"] is True
        assert data["activity_count"] == 4
        assert data["used_fallback"] is False
        assert data["error"] is None
        assert data["catalog_source"] == str(catalog_file)
        assert data["filters"] == {"duration": "any", "type": "any"}

    def test_broken_catalog_falls_back(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("not json", encoding="utf-8")
        app = create_app(settings=AppSettings(catalog_source=str(path)))

        with TestClient(app) as client:
            data = client.get("/api/status").json()

        assert data["used_fallback"] is True
        assert data["activity_count"] == len(FALLBACK_ACTIVITIES)
        assert data["error"].startswith("Malformed JSON")
        assert data["persisting_filters"] is False


class TestActivities:
    def test_lists_all_activities(self, client):
        data = client.get("/api/activities").json()

        assert data["count"] == 4
        assert data["total"] == 4
        first = data["activities"][0]
        assert first["type"] == "fun"
        assert first["duration_label"] == "10 min"
        assert first["type_label"] == "Fun Activity"

    def test_query_filters_do_not_persist(self, client, filters_path):
        data = client.get("/api/activities", params={"duration": "short"}).json()

        assert sorted(item["id"] for item in data["activities"]) == [1, 3]
        assert data["filters"] == {"duration": "short", "type": "any"}
        assert client.get("/api/filters").json()["filters"]["duration"] == "any"
        assert not filters_path.exists()

    def test_invalid_query_value(self, client):
        response = client.get("/api/activities", params={"type": "leisure"})

        assert response.status_code == 400


class TestFilters:
    def test_partial_update_persists(self, client, filters_path):
        response = client.put("/api/filters", json={"type": "chores"})

        assert response.status_code == 200
        assert response.json() == {
            "filters": {"duration": "any", "type": "chores"},
            "match_count": 1,
        }
        stored = json.loads(filters_path.read_text(encoding="utf-8"))
        assert stored["activityai-filters"] == {"duration": "any", "type": "chores"}

    def test_invalid_value_is_rejected(self, client):
        response = client.put("/api/filters", json={"duration": "forever"})

        assert response.status_code == 400
        assert client.get("/api/filters").json()["filters"]["duration"] == "any"

    def test_unknown_field_is_rejected(self, client):
        response = client.put("/api/filters", json={"category": "fun"})

        assert response.status_code == 422

    def test_reset(self, client):
        client.put("/api/filters", json={"duration": "extended", "type": "chores"})

        data = client.post("/api/filters/reset").json()

        assert data == {"filters": {"duration": "any", "type": "any"}, "match_count": 4}

    def test_saved_filters_are_restored_by_a_new_app(self, catalog_file, filters_path):
        settings = AppSettings(catalog_source=str(catalog_file), filters_path=filters_path)
        with TestClient(create_app(settings=settings)) as first:
            first.put("/api/filters", json={"duration": "long"})

        with TestClient(create_app(settings=settings)) as second:
            data = second.get("/api/filters").json()

        assert data["filters"] == {"duration": "long", "type": "any"}
        assert data["match_count"] == 1


class TestSuggestion:
    def test_returns_matching_activity(self, client):
        client.put("/api/filters", json={"duration": "short", "type": "chores"})

        data = client.get("/api/suggestion").json()

        assert data["activity"]["id"] == 3
        assert data["activity"]["materials"] == ["Sponge"]
        assert data["match_count"] == 1
        assert data["message"] is None

    def test_no_match(self, client):
        client.put("/api/filters", json={"duration": "standard"})

        data = client.get("/api/suggestion").json()

        assert data["activity"] is None
        assert data["match_count"] == 0
        assert data["message"] == NO_MATCH_MESSAGE


class TestStats:
    def test_all_scope(self, client):
        data = client.get("/api/stats").json()

        assert data["total"] == 4
        assert data["by_type"] == {"fun": 3, "chores": 1}
        assert data["by_duration"] == {"short": 2, "standard": 0, "long": 1, "extended": 1}
        assert data["options"]["duration"]["any"] == 4

    def test_filtered_scope(self, client):
        client.put("/api/filters", json={"type": "fun"})

        data = client.get("/api/stats", params={"scope": "filtered"}).json()

        assert data["scope"] == "filtered"
        assert data["total"] == 3

    def test_invalid_scope(self, client):
        assert client.get("/api/stats", params={"scope": "some"}).status_code == 400


class TestCatalogReload:
    def test_reload_picks_up_new_content(self, client, catalog_file):
        catalog_file.write_text(
            json.dumps([{"id": 9, "title": "New", "duration": 20, "type": "chores"}]),
            encoding="utf-8",
        )

        data = client.post("/api/catalog/reload").json()

        assert data == {"activity_count": 1, "used_fallback": False, "error": None}
        assert client.get("/api/activities").json()["activities"][0]["id"] == 9


def test_index_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "Activity Suggester" in response.text
