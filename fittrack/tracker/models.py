"""Tracker data model — Pydantic v2 models.

Domain types hold values only; BMI, progress percentage and achievement are
derived on access and never stored. Display strings live in views.py.
"""

from __future__ import annotations

import datetime as dt
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from fittrack.tracker import catalog, features
from fittrack.tracker.catalog import GoalType


def _reject_bool(value: Any) -> Any:
    # Lax int/float parsing would read True as 1.
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    return value


FormInt = Annotated[int, BeforeValidator(_reject_bool)]
FormFloat = Annotated[float, BeforeValidator(_reject_bool)]


class Profile(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    age: FormInt = Field(ge=1, le=150)
    weight_kg: FormFloat = Field(gt=0, le=500, allow_inf_nan=False)
    height_cm: FormFloat = Field(gt=0, le=300, allow_inf_nan=False)

    @property
    def bmi(self) -> float:
        return features.bmi(self.weight_kg, self.height_cm)

    @property
    def bmi_category(self) -> str:
        return features.bmi_category(self.bmi)


class ActivityInput(BaseModel):
    """Raw activity form values, validated before anything is stamped or stored."""

    model_config = ConfigDict(str_strip_whitespace=True)

    category: str
    activity_type: str
    duration_min: FormInt = Field(gt=0)

    @model_validator(mode="after")
    def _check_pair(self) -> ActivityInput:
        if not catalog.is_valid_pair(self.category, self.activity_type):
            raise ValueError(f"'{self.activity_type}' is not a {self.category} activity")
        return self


class Activity(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: dt.date
    category: str
    activity_type: str
    duration_min: FormInt = Field(gt=0)
    calories: float = Field(ge=0, allow_inf_nan=False)

    @model_validator(mode="after")
    def _check_pair(self) -> Activity:
        if not catalog.is_valid_pair(self.category, self.activity_type):
            raise ValueError(f"'{self.activity_type}' is not a {self.category} activity")
        return self


class GoalInput(BaseModel):
    goal_type: GoalType
    target: FormFloat = Field(gt=0, allow_inf_nan=False)
    duration_days: FormInt = Field(gt=0)


class Goal(BaseModel):
    goal_type: GoalType
    target: FormFloat = Field(gt=0, allow_inf_nan=False)
    progress: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    start_date: dt.date
    end_date: dt.date

    @property
    def progress_pct(self) -> int:
        return features.goal_progress_pct(self.progress, self.target)

    @property
    def achieved(self) -> bool:
        return features.goal_achieved(self.progress, self.target)


# ---------------------------------------------------------------------------
# Read-only views handed to the UI
# ---------------------------------------------------------------------------


class GoalView(BaseModel):
    goal_type: GoalType
    target: float
    progress: float
    start_date: dt.date
    end_date: dt.date
    progress_pct: int
    achieved: bool
    bar_value: int  # progress_pct clamped to [0, 100]

    @classmethod
    def of(cls, goal: Goal) -> GoalView:
        pct = goal.progress_pct
        return cls(
            goal_type=goal.goal_type,
            target=goal.target,
            progress=goal.progress,
            start_date=goal.start_date,
            end_date=goal.end_date,
            progress_pct=pct,
            achieved=goal.achieved,
            bar_value=features.progress_bar_value(pct),
        )


class CategoryTotals(BaseModel):
    duration_min: int = 0
    calories: float = 0.0


class WeeklyReport(BaseModel):
    start: dt.date
    end: dt.date
    activities: list[Activity] = Field(default_factory=list)
    count: int = 0
    total_duration_min: int = 0
    total_calories: float = 0.0  # Rounded to one decimal
    by_category: dict[str, CategoryTotals] = Field(default_factory=dict)  # First-appearance order


class TrackerViews(BaseModel):
    """Snapshot pushed to UI observers after every change."""

    profile: Profile | None = None
    profile_summary: str
    activity_rows: list[list[str | int]] = Field(default_factory=list)
    goals: list[GoalView] = Field(default_factory=list)
    goals_panel: list[str] = Field(default_factory=list)  # One line per goal, or the empty-panel label
    load_error: str | None = None  # Message of the last failed load, if any


class TrackerState(BaseModel):
    profile: Profile | None = None
    activities: list[Activity] = Field(default_factory=list)
    goals: list[Goal] = Field(default_factory=list)
