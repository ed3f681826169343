"""Application facade — the single entry point the UI calls.

Owns the profile, the activity log and the goal engine, sequences every
mutation, and pushes a fresh TrackerViews snapshot to observers after each
change. Tracker errors never escape: every operation returns a Result.
"""

from __future__ import annotations

import os
from datetime import date
from pathlib import Path
from typing import Any, Callable

from loguru import logger

from fittrack.tracker import reporter, storage, views
from fittrack.tracker.activity_log import ActivityLog
from fittrack.tracker.errors import EmptyState, PersistenceError, Result, TrackerError
from fittrack.tracker.goals import GoalEngine
from fittrack.tracker.models import (
    Activity,
    GoalView,
    Profile,
    TrackerState,
    TrackerViews,
    WeeklyReport,
)
from fittrack.tracker.profile import ProfileStore

Observer = Callable[[TrackerViews], None]


class FitnessTracker:
    def __init__(
        self,
        data_file: str | os.PathLike[str],
        clock: Callable[[], date] = date.today,
        report_days: int = 7,
    ) -> None:
        self.data_file = Path(data_file)
        self._clock = clock
        self._report_days = report_days
        self._observers: list[Observer] = []
        self.last_load_error: PersistenceError | None = None  # Kept for display until the next load
        self._reset(TrackerState())

    def _reset(self, state: TrackerState) -> None:
        self._profile = ProfileStore(state.profile)
        self._goals = GoalEngine(self._profile, self._clock, state.goals)
        self._activities = ActivityLog(self._profile, self._clock, state.activities)
        self._activities.subscribe(self._goals.apply)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, observer: Observer) -> None:
        self._observers.append(observer)

    def views(self) -> TrackerViews:
        profile = self._profile.get()
        goal_views = self._goals.list()
        return TrackerViews(
            profile=profile,
            profile_summary=views.profile_summary(profile),
            activity_rows=[views.activity_row(a) for a in self._activities.list()],
            goals=goal_views,
            goals_panel=views.goals_panel(goal_views),
            load_error=self.last_load_error.message if self.last_load_error else None,
        )

    def _notify(self) -> None:
        if not self._observers:
            return
        snapshot = self.views()
        for observer in self._observers:
            observer(snapshot)

    def state(self) -> TrackerState:
        return TrackerState(
            profile=self._profile.get(),
            activities=self._activities.list(),
            goals=self._goals.goals(),
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_profile(self, name: Any, age: Any, weight_kg: Any, height_cm: Any) -> Result[Profile]:
        try:
            profile = self._profile.set(name, age, weight_kg, height_cm)
        except TrackerError as e:
            logger.warning(f"Profile rejected: {e.message}")
            return Result.failure(e)
        self._notify()
        return Result.success(profile, views.STATUS_PROFILE_SET)

    def log_activity(self, category: Any, activity_type: Any, duration_min: Any) -> Result[Activity]:
        try:
            activity = self._activities.log(category, activity_type, duration_min)
        except TrackerError as e:
            logger.warning(f"Activity rejected: {e.message}")
            return Result.failure(e)
        self._notify()
        return Result.success(activity, views.STATUS_ACTIVITY_LOGGED)

    def set_goal(self, goal_type: Any, target: Any, duration_days: Any) -> Result[GoalView]:
        try:
            goal = self._goals.create(goal_type, target, duration_days)
        except TrackerError as e:
            logger.warning(f"Goal rejected: {e.message}")
            return Result.failure(e)
        self._notify()
        return Result.success(GoalView.of(goal), views.STATUS_GOAL_SET)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_profile(self) -> Result[Profile]:
        return Result.success(self._profile.get())

    def list_activities(self) -> Result[list[Activity]]:
        return Result.success(self._activities.list(), views.STATUS_VIEWING_ACTIVITIES)

    def list_goals(self) -> Result[list[GoalView]]:
        return Result.success(self._goals.list())

    def weekly_report(self) -> Result[WeeklyReport]:
        report = reporter.weekly_report(self._activities.list(), self._clock(), self._report_days)
        if report is None:
            logger.warning("Weekly report requested with no activities")
            return Result.failure(EmptyState(views.NO_ACTIVITIES_YET))
        return Result.success(report)

    def export_csv(self, path: str | os.PathLike[str]) -> Result[Path]:
        content = reporter.csv_export(self._activities.list())
        if content is None:
            logger.warning("Export requested with no activities")
            return Result.failure(EmptyState(views.NO_DATA_TO_EXPORT))

        target = Path(path)
        try:
            with target.open("w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            err = PersistenceError(f"Error exporting data: {e}")
            logger.error(err.message)
            return Result.failure(err)
        logger.info(f"Exported {len(self._activities)} activities to {target}")
        return Result.success(target, views.STATUS_EXPORTED)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def load(self) -> Result[TrackerState]:
        """Replace in-memory state with the data file's contents.

        On failure the tracker continues with empty state and the error is
        returned for display.
        """
        try:
            state = storage.load(self.data_file)
        except PersistenceError as e:
            logger.error(e.message)
            self.last_load_error = e
            self._reset(TrackerState())
            self._notify()
            return Result.failure(e)
        self.last_load_error = None
        self._reset(state)
        self._notify()
        return Result.success(state)

    def save(self) -> Result[None]:
        try:
            storage.save(self.state(), self.data_file)
        except PersistenceError as e:
            logger.error(e.message)
            return Result.failure(e)
        return Result.success(None, views.STATUS_SAVED)

    def quit(self) -> Result[None]:
        """Graceful shutdown: persist everything."""
        logger.info("Shutting down tracker")
        return self.save()
