"""Static activity catalog — taxonomy, calorie coefficients, goal types.

Coefficients are calories per minute. Only the types listed in
CALORIES_PER_MINUTE have their own rate; every other type (including
"Bodyweight Exercises" and "Resistance Training") uses DEFAULT_CALORIES_PER_MINUTE
so that stored calorie values stay comparable with older data.
"""

from __future__ import annotations

from enum import Enum


class GoalType(str, Enum):
    calories_burned = "Calories Burned"
    activity_duration = "Activity Duration"


ACTIVITY_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Cardio": ("Running", "Walking", "Cycling", "Swimming"),
    "Strength": ("Weight Training", "Bodyweight Exercises", "Resistance Training"),
    "Flexibility": ("Yoga", "Stretching", "Pilates"),
    "Sports": ("Basketball", "Tennis", "Soccer", "Other Sports"),
}

DEFAULT_CALORIES_PER_MINUTE = 5.0

CALORIES_PER_MINUTE: dict[str, float] = {
    "Running": 11.5,
    "Walking": 5.0,
    "Cycling": 7.5,
    "Swimming": 8.0,
    "Weight Training": 6.0,
    "Yoga": 4.0,
    "Stretching": 2.5,
    "Pilates": 4.5,
    "Basketball": 9.0,
    "Tennis": 8.0,
    "Soccer": 10.0,
}


def coefficient(activity_type: str) -> float:
    """Calories per minute for an activity type. Never raises."""
    return CALORIES_PER_MINUTE.get(activity_type, DEFAULT_CALORIES_PER_MINUTE)


def list_categories() -> list[str]:
    return list(ACTIVITY_CATEGORIES.keys())


def types_for(category: str) -> list[str]:
    """Types allowed under `category`; empty for an unknown category."""
    return list(ACTIVITY_CATEGORIES.get(category, ()))


def is_valid_pair(category: str, activity_type: str) -> bool:
    return activity_type in ACTIVITY_CATEGORIES.get(category, ())


def list_goal_types() -> list[str]:
    return [g.value for g in GoalType]
