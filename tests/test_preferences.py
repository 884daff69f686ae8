"""
Tests for the persisted filter selection.
"""

import json

import pytest

from activity_suggester.models import DEFAULT_FILTERS, FilterSelection
from activity_suggester.preferences import STORAGE_KEY, FilterStore


@pytest.fixture
def store(tmp_path):
    return FilterStore(tmp_path / "state" / "filters.json")


class TestFilterStore:
    def test_missing_file_gives_defaults(self, store):
        assert store.load() == DEFAULT_FILTERS

    def test_round_trip(self, store):
        store.save(FilterSelection(duration="long", category="chores"))

        assert store.load() == FilterSelection(duration="long", category="chores")

    def test_file_layout(self, store):
        store.save(FilterSelection(duration="short"))

        data = json.loads(store.path.read_text(encoding="utf-8"))
        assert data == {STORAGE_KEY: {"duration": "short", "type": "any"}}

    def test_other_keys_are_preserved(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")

        store.save(FilterSelection(category="fun"))

        data = json.loads(store.path.read_text(encoding="utf-8"))
        assert data["theme"] == "dark"
        assert data[STORAGE_KEY]["type"] == "fun"

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            json.dumps(["list"]),
            json.dumps({STORAGE_KEY: "short"}),
            json.dumps({STORAGE_KEY: {"duration": "short"}}),
            json.dumps({STORAGE_KEY: {"duration": "forever", "type": "any"}}),
            json.dumps({STORAGE_KEY: {"duration": "any", "type": "work"}}),
            pytest.param("[" * 100000 + "]" * 100000, id="deeply-nested"),
        ],
    )
    def test_corrupt_data_reverts_to_defaults(self, store, content):
        store.path.parent.mkdir(parents=True)
        store.path.write_text(content, encoding="utf-8")

        assert store.load() == DEFAULT_FILTERS

    def test_clear(self, store):
        store.save(FilterSelection(duration="extended"))

        store.clear()

        assert store.load() == DEFAULT_FILTERS

    def test_save_failure_is_not_raised(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = FilterStore(blocker / "filters.json")

        store.save(FilterSelection(duration="short"))

        assert store.load() == DEFAULT_FILTERS


class TestFilterSelection:
    def test_defaults(self):
        assert FilterSelection().to_dict() == {"duration": "any", "type": "any"}
        assert FilterSelection().is_default

    @pytest.mark.parametrize("kwargs", [{"duration": "Short"}, {"category": "leisure"}])
    def test_rejects_unknown_values(self, kwargs):
        with pytest.raises(ValueError):
            FilterSelection(**kwargs)

    def test_replace_keeps_unspecified_fields(self):
        selection = FilterSelection(duration="long", category="fun")

        assert selection.replace(category="chores") == FilterSelection("long", "chores")

    def test_from_mapping_requires_both_fields(self):
        with pytest.raises(ValueError):
            FilterSelection.from_mapping({"type": "fun"})
