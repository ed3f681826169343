"""Shared fixtures for the test suite."""

from __future__ import annotations

from datetime import date, timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from fittrack.main import app
from fittrack.tracker.facade import FitnessTracker
from fittrack.tracker.models import Activity
from fittrack.tracker.router import get_tracker


# ---------------------------------------------------------------------------
# Controllable clock
# ---------------------------------------------------------------------------

class FixedClock:
    """Callable clock whose date tests can move."""

    def __init__(self, today: date):
        self.today = today

    def __call__(self) -> date:
        return self.today

    def advance(self, days: int) -> None:
        self.today += timedelta(days=days)


def make_activity(
    day: date,
    activity_type: str = "Running",
    category: str = "Cardio",
    duration_min: int = 30,
    calories: float | None = None,
) -> Activity:
    """Helper to build a stored Activity with an explicit date."""
    if calories is None:
        calories = duration_min * 11.5 if activity_type == "Running" else duration_min * 5.0
    return Activity(
        date=day,
        category=category,
        activity_type=activity_type,
        duration_min=duration_min,
        calories=calories,
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def clock():
    return FixedClock(date(2025, 1, 10))


@pytest.fixture()
def data_file(tmp_path):
    return tmp_path / "fitness_tracker_data.txt"


@pytest.fixture()
def tracker(data_file, clock):
    return FitnessTracker(data_file, clock=clock)


@pytest.fixture()
def ada(tracker):
    """Tracker with the reference profile already set."""
    result = tracker.set_profile("Ada", 30, 65.0, 170.0)
    assert result.ok
    return tracker


@pytest.fixture()
def override_tracker(tracker):
    """Override the FastAPI dependency so no lifespan / real data file is needed."""
    app.dependency_overrides[get_tracker] = lambda: tracker
    yield tracker
    app.dependency_overrides.clear()


@pytest.fixture()
async def client(override_tracker):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
