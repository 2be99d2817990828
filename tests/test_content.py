"""Tests for demonlist.core.content – reading the list from a content directory."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from demonlist.core.content import ContentRepository
from demonlist.core.levels import Failed, Loaded, Role


def _write_json(path: Path, data) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


def _level(level_id: int, name: str) -> dict:
    return {
        "id": level_id,
        "name": name,
        "author": "someone",
        "creators": [],
        "verifier": "someone",
        "verification": "https://example.com",
        "percentToQualify": 50,
        "records": [],
    }


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    d = tmp_path / "data"
    d.mkdir()
    return d


# ---------------------------------------------------------------------------
# fetch_list
# ---------------------------------------------------------------------------

class TestFetchList:
    def test_levels_in_list_order(self, data_dir: Path):
        _write_json(data_dir / "_list.json", ["b", "a"])
        _write_json(data_dir / "a.json", _level(1, "Alpha"))
        _write_json(data_dir / "b.json", _level(2, "Beta"))
        slots = ContentRepository(data_dir).fetch_list()
        assert [s.level.name for s in slots] == ["Beta", "Alpha"]
        assert slots[0].level.path == "b"

    def test_missing_level_file_is_failed_slot(self, data_dir: Path):
        _write_json(data_dir / "_list.json", ["a", "level5"])
        _write_json(data_dir / "a.json", _level(1, "Alpha"))
        slots = ContentRepository(data_dir).fetch_list()
        assert isinstance(slots[0], Loaded)
        assert slots[1] == Failed("level5")

    def test_malformed_level_file_is_failed_slot(self, data_dir: Path):
        _write_json(data_dir / "_list.json", ["broken", "partial"])
        (data_dir / "broken.json").write_text("{not json", encoding="utf-8")
        _write_json(data_dir / "partial.json", {"name": "No id"})
        slots = ContentRepository(data_dir).fetch_list()
        assert slots == [Failed("broken"), Failed("partial")]

    def test_list_not_utf8(self, data_dir: Path):
        (data_dir / "_list.json").write_bytes(b'["\xff\xfe"]')
        assert ContentRepository(data_dir).fetch_list() is None

    def test_level_with_non_object_record_is_failed_slot(self, data_dir: Path):
        _write_json(data_dir / "_list.json", ["a", "b"])
        level = _level(1, "Alpha")
        level["records"] = [5]
        _write_json(data_dir / "a.json", level)
        _write_json(data_dir / "b.json", _level(2, "Beta"))
        slots = ContentRepository(data_dir).fetch_list()
        assert slots[0] == Failed("a")
        assert isinstance(slots[1], Loaded)

    def test_missing_list_file(self, data_dir: Path):
        assert ContentRepository(data_dir).fetch_list() is None

    def test_list_not_an_array(self, data_dir: Path):
        _write_json(data_dir / "_list.json", {"a": 1})
        assert ContentRepository(data_dir).fetch_list() is None

    def test_list_not_json(self, data_dir: Path):
        (data_dir / "_list.json").write_text("oops", encoding="utf-8")
        assert ContentRepository(data_dir).fetch_list() is None

    def test_empty_list(self, data_dir: Path):
        _write_json(data_dir / "_list.json", [])
        assert ContentRepository(data_dir).fetch_list() == []

    def test_failure_is_logged(self, data_dir: Path, caplog: pytest.LogCaptureFixture):
        _write_json(data_dir / "_list.json", ["gone"])
        with caplog.at_level("WARNING"):
            ContentRepository(data_dir).fetch_list()
        assert "Failed to load level #1 gone" in caplog.text


# ---------------------------------------------------------------------------
# fetch_editors
# ---------------------------------------------------------------------------

class TestFetchEditors:
    def test_editors(self, data_dir: Path):
        _write_json(data_dir / "_editors.json", [
            {"name": "Owner", "role": "owner", "link": "https://x"},
            {"name": "Dev", "role": "dev"},
        ])
        editors = ContentRepository(data_dir).fetch_editors()
        assert [e.name for e in editors] == ["Owner", "Dev"]
        assert editors[1].role is Role.DEV

    def test_missing_file(self, data_dir: Path):
        assert ContentRepository(data_dir).fetch_editors() is None

    def test_not_an_array(self, data_dir: Path):
        _write_json(data_dir / "_editors.json", {"name": "Owner"})
        assert ContentRepository(data_dir).fetch_editors() is None

    def test_non_object_entry(self, data_dir: Path):
        _write_json(data_dir / "_editors.json", ["Owner"])
        assert ContentRepository(data_dir).fetch_editors() is None

    def test_unknown_role_fails_whole_roster(self, data_dir: Path):
        _write_json(data_dir / "_editors.json", [
            {"name": "Owner", "role": "owner"},
            {"name": "Mystery", "role": "wizard"},
        ])
        assert ContentRepository(data_dir).fetch_editors() is None


# ---------------------------------------------------------------------------
# Bundled sample data
# ---------------------------------------------------------------------------

class TestBundledData:
    def test_sample_content_loads(self):
        from demonlist.core.config import DEFAULT_DATA_DIR

        repo = ContentRepository(DEFAULT_DATA_DIR)
        slots = repo.fetch_list()
        assert slots
        assert all(isinstance(s, Loaded) for s in slots)
        assert repo.fetch_editors()
