"""Goal engine — creates goals and accrues progress from logged activities.

Progress is a running counter: every activity adds to every goal of the
matching type, whether or not the activity date falls inside the goal's
[start_date, end_date] window. Goals are never recomputed from the log.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Callable

from loguru import logger
from pydantic import ValidationError

from fittrack.tracker.catalog import GoalType
from fittrack.tracker.errors import InvalidInput, ProfileRequired
from fittrack.tracker.models import Activity, Goal, GoalInput, GoalView
from fittrack.tracker.profile import ProfileStore


def contribution(goal_type: GoalType, activity: Activity) -> float:
    """How much one activity adds to a goal of `goal_type`."""
    if goal_type == GoalType.calories_burned:
        return activity.calories
    if goal_type == GoalType.activity_duration:
        return float(activity.duration_min)
    return 0.0


class GoalEngine:
    def __init__(
        self,
        profile: ProfileStore,
        clock: Callable[[], date] = date.today,
        goals: list[Goal] | None = None,
    ) -> None:
        self._profile = profile
        self._clock = clock
        self._goals: list[Goal] = list(goals or [])

    def create(self, goal_type: Any, target: Any, duration_days: Any) -> Goal:
        """Append a new goal starting today with zero progress.

        Raises ProfileRequired when no profile is set, InvalidInput for an
        unknown goal type or a non-positive target / duration.
        """
        if not self._profile.is_set:
            raise ProfileRequired()

        try:
            form = GoalInput(goal_type=goal_type, target=target, duration_days=duration_days)
        except ValidationError as exc:
            raise InvalidInput.from_validation(exc) from exc

        start = self._clock()
        goal = Goal(
            goal_type=form.goal_type,
            target=form.target,
            progress=0.0,
            start_date=start,
            end_date=start + timedelta(days=form.duration_days),
        )
        self._goals.append(goal)
        logger.info(f"Goal set: {goal.goal_type.value} {goal.target:.1f} due {goal.end_date.isoformat()}")
        return goal

    def apply(self, activity: Activity) -> None:
        """Add the activity's contribution to every goal, in creation order."""
        for goal in self._goals:
            goal.progress += contribution(goal.goal_type, activity)

    def goals(self) -> list[Goal]:
        return list(self._goals)

    def list(self) -> list[GoalView]:
        return [GoalView.of(g) for g in self._goals]
