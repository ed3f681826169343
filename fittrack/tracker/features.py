"""Pure stateless derived quantities — math only, never raises."""

from __future__ import annotations

import math


def bmi(weight_kg: float, height_cm: float) -> float:
    """Body Mass Index: weight / (height in metres) squared."""
    return weight_kg / (height_cm / 100) ** 2


def bmi_category(value: float) -> str:
    """Map a BMI value to its band: <18.5, [18.5, 25), [25, 30), >=30."""
    if value < 18.5:
        return "Underweight"
    if value < 25:
        return "Normal"
    if value < 30:
        return "Overweight"
    return "Obese"


def activity_calories(duration_min: int, per_minute: float) -> float:
    return duration_min * per_minute


def goal_progress_pct(progress: float, target: float) -> int:
    """floor(100 * progress / target). Not capped; 0 for a non-positive target."""
    if target <= 0.0:
        return 0
    return math.floor(100 * progress / target)


def goal_achieved(progress: float, target: float) -> bool:
    return progress >= target


def progress_bar_value(progress_pct: int) -> int:
    """Clamp a percentage into the [0, 100] range of a progress bar."""
    return min(max(progress_pct, 0), 100)
