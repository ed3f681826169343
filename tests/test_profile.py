"""Tests for the profile store."""

import pytest

from fittrack.tracker.errors import InvalidInput
from fittrack.tracker.profile import ProfileStore


class TestProfileStore:
    def test_unset_by_default(self):
        store = ProfileStore()
        assert store.get() is None
        assert store.is_set is False
        assert store.summary() == "No user profile set"

    def test_set_and_get(self):
        store = ProfileStore()
        profile = store.set("Ada", 30, 65.0, 170.0)
        assert store.get() == profile
        assert abs(profile.bmi - 22.491) < 1e-3
        assert profile.bmi_category == "Normal"

    def test_set_overwrites(self):
        store = ProfileStore()
        store.set("Ada", 30, 65.0, 170.0)
        store.set("Ada", 31, 95.0, 170.0)
        assert store.get().age == 31
        assert store.get().bmi_category == "Obese"

    def test_summary_line(self):
        store = ProfileStore()
        store.set("Ada", 30, 65.0, 170.0)
        assert store.summary() == (
            "Name: Ada, Age: 30, Weight: 65.0 kg, Height: 170.0 cm, BMI: 22.5 (Normal)"
        )

    def test_invalid_keeps_previous(self):
        store = ProfileStore()
        store.set("Ada", 30, 65.0, 170.0)
        with pytest.raises(InvalidInput) as exc:
            store.set("Ada", "abc", 65.0, 170.0)
        assert "age" in exc.value.message
        assert store.get().age == 30

    def test_invalid_error_kind(self):
        with pytest.raises(InvalidInput) as exc:
            ProfileStore().set("", 30, 65.0, 170.0)
        assert exc.value.kind == "InvalidInput"
