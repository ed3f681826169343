"""Append-only activity log.

Every accepted activity is stamped with the clock's date, priced with the
calorie catalog at that moment, appended, then handed to each listener
(the goal engine) in registration order.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Callable

from loguru import logger
from pydantic import ValidationError

from fittrack.tracker import catalog, features
from fittrack.tracker.errors import InvalidInput, ProfileRequired
from fittrack.tracker.models import Activity, ActivityInput
from fittrack.tracker.profile import ProfileStore

ActivityListener = Callable[[Activity], None]


class ActivityLog:
    def __init__(
        self,
        profile: ProfileStore,
        clock: Callable[[], date] = date.today,
        activities: list[Activity] | None = None,
    ) -> None:
        self._profile = profile
        self._clock = clock
        self._activities: list[Activity] = list(activities or [])
        self._listeners: list[ActivityListener] = []

    def subscribe(self, listener: ActivityListener) -> None:
        self._listeners.append(listener)

    def log(self, category: Any, activity_type: Any, duration_min: Any) -> Activity:
        """Validate, price, stamp and append one activity.

        Raises ProfileRequired before any validation when no profile is set,
        and InvalidInput for an illegal (category, type) pair or a duration
        that is not a positive integer. Nothing is appended on failure.
        """
        if not self._profile.is_set:
            raise ProfileRequired()

        try:
            form = ActivityInput(
                category=category,
                activity_type=activity_type,
                duration_min=duration_min,
            )
        except ValidationError as exc:
            raise InvalidInput.from_validation(exc) from exc

        calories = features.activity_calories(form.duration_min, catalog.coefficient(form.activity_type))
        activity = Activity(
            date=self._clock(),
            category=form.category,
            activity_type=form.activity_type,
            duration_min=form.duration_min,
            calories=calories,
        )
        self._activities.append(activity)
        logger.info(
            f"Logged {activity.activity_type} ({activity.category}): "
            f"{activity.duration_min} min, {activity.calories:.1f} kcal"
        )

        for listener in self._listeners:
            listener(activity)
        return activity

    def list(self) -> list[Activity]:
        """Activities in insertion order (a copy; the log itself is never exposed)."""
        return list(self._activities)

    def __len__(self) -> int:
        return len(self._activities)
