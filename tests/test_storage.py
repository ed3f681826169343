"""Tests for the local data file."""

from __future__ import annotations

import json
from datetime import date

import pytest

from fittrack.tracker import storage
from fittrack.tracker.catalog import GoalType
from fittrack.tracker.errors import PersistenceError
from fittrack.tracker.models import Goal, Profile, TrackerState
from tests.conftest import make_activity


def _state() -> TrackerState:
    return TrackerState(
        profile=Profile(name="Ada", age=30, weight_kg=65.0, height_cm=170.0),
        activities=[
            make_activity(date(2025, 1, 9), duration_min=30),
            make_activity(date(2025, 1, 10), "Yoga", "Flexibility", 60, 240.0),
        ],
        goals=[
            Goal(
                goal_type=GoalType.calories_burned,
                target=1000.0,
                progress=585.0,
                start_date=date(2025, 1, 9),
                end_date=date(2025, 1, 16),
            )
        ],
    )


class TestLoad:
    def test_missing_file_is_empty_state(self, data_file):
        assert storage.load(data_file) == TrackerState()

    def test_corrupt_json(self, data_file):
        data_file.write_text("\xac\xed\x00\x05 not json", encoding="utf-8")
        with pytest.raises(PersistenceError):
            storage.load(data_file)

    def test_not_utf8(self, data_file):
        # Java object stream header left behind by the desktop app
        data_file.write_bytes(b"\xac\xed\x00\x05sr\x00\x1aFitnessTracker\x24User")
        with pytest.raises(PersistenceError):
            storage.load(data_file)

    def test_wrong_magic(self, data_file):
        data_file.write_text(json.dumps({"magic": "OTHER", "version": 1}), encoding="utf-8")
        with pytest.raises(PersistenceError):
            storage.load(data_file)

    def test_not_an_object(self, data_file):
        data_file.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(PersistenceError):
            storage.load(data_file)

    def test_unknown_version(self, data_file):
        data_file.write_text(
            json.dumps({"magic": storage.MAGIC, "version": 99, "profile": None}),
            encoding="utf-8",
        )
        with pytest.raises(PersistenceError) as exc:
            storage.load(data_file)
        assert "99" in exc.value.message

    def test_invalid_record(self, data_file):
        doc = {
            "magic": storage.MAGIC,
            "version": storage.FORMAT_VERSION,
            "profile": None,
            "activities": [
                {
                    "date": "2025-01-10",
                    "category": "Cardio",
                    "activity_type": "Yoga",
                    "duration_min": 15,
                    "calories": 60.0,
                }
            ],
            "goals": [],
        }
        data_file.write_text(json.dumps(doc), encoding="utf-8")
        with pytest.raises(PersistenceError):
            storage.load(data_file)


class TestSave:
    def test_roundtrip(self, data_file):
        state = _state()
        storage.save(state, data_file)
        assert storage.load(data_file) == state

    def test_header_and_sections(self, data_file):
        storage.save(_state(), data_file)
        doc = json.loads(data_file.read_text(encoding="utf-8"))
        assert doc["magic"] == "FITTRACK"
        assert doc["version"] == 1
        assert doc["profile"]["name"] == "Ada"
        assert [a["date"] for a in doc["activities"]] == ["2025-01-09", "2025-01-10"]
        assert doc["goals"][0]["goal_type"] == "Calories Burned"

    def test_empty_state_roundtrip(self, data_file):
        storage.save(TrackerState(), data_file)
        assert storage.load(data_file) == TrackerState()

    def test_no_temp_files_left(self, data_file):
        storage.save(_state(), data_file)
        storage.save(_state(), data_file)
        assert [p.name for p in data_file.parent.iterdir()] == [data_file.name]

    def test_creates_parent_directory(self, tmp_path):
        target = tmp_path / "nested" / "data.txt"
        storage.save(_state(), target)
        assert storage.load(target) == _state()

    def test_failed_write_keeps_previous_file(self, data_file, monkeypatch):
        storage.save(_state(), data_file)
        before = data_file.read_text(encoding="utf-8")

        def boom(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(storage.os, "replace", boom)
        with pytest.raises(PersistenceError):
            storage.save(TrackerState(), data_file)

        assert data_file.read_text(encoding="utf-8") == before
        assert [p.name for p in data_file.parent.iterdir()] == [data_file.name]
