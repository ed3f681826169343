"""Display strings for the UI — the only place domain values become text."""

from __future__ import annotations

from fittrack.tracker.models import Activity, Goal, GoalView, Profile, WeeklyReport

STATUS_PROFILE_SET = "User profile updated successfully"
STATUS_ACTIVITY_LOGGED = "Activity logged successfully"
STATUS_GOAL_SET = "New goal set successfully"
STATUS_SAVED = "Data saved successfully"
STATUS_EXPORTED = "Data exported successfully"
STATUS_VIEWING_ACTIVITIES = "Viewing all activities"

NO_PROFILE = "No user profile set"
NO_ACTIVE_GOALS = "No active goals"
NO_GOALS_YET = "No goals set yet."
NO_ACTIVITIES_YET = "No activities logged yet."
NO_DATA_TO_EXPORT = "No data to export."

ACTIVITY_COLUMNS = ("Date", "Type", "Category", "Duration (min)", "Calories")


def profile_summary(profile: Profile | None) -> str:
    if profile is None:
        return NO_PROFILE
    return (
        f"Name: {profile.name}, Age: {profile.age}, "
        f"Weight: {profile.weight_kg:.1f} kg, Height: {profile.height_cm:.1f} cm, "
        f"BMI: {profile.bmi:.1f} ({profile.bmi_category})"
    )


def activity_line(activity: Activity) -> str:
    return (
        f"{activity.activity_type} ({activity.category}) - {activity.duration_min} minutes - "
        f"{activity.calories:.1f} calories burned - {activity.date.isoformat()}"
    )


def activity_row(activity: Activity) -> list[str | int]:
    """One row of the activities table, columns as in ACTIVITY_COLUMNS."""
    return [
        activity.date.isoformat(),
        activity.activity_type,
        activity.category,
        activity.duration_min,
        f"{activity.calories:.1f}",
    ]


def goal_line(goal: Goal | GoalView) -> str:
    label = goal.goal_type.value
    mark = "✓" if goal.achieved else ""
    return (
        f"{label}: {goal.progress:.1f}/{goal.target:.1f} {label.lower()} "
        f"({goal.progress_pct}%) - Due: {goal.end_date.isoformat()} {mark}"
    ).rstrip()


def goals_panel(goals: list[GoalView]) -> list[str]:
    if not goals:
        return [NO_ACTIVE_GOALS]
    return [goal_line(g) for g in goals]


def goals_overview(goals: list[GoalView]) -> str:
    if not goals:
        return NO_GOALS_YET
    lines = ["Current Goals:", ""]
    lines.extend(goal_line(g) for g in goals)
    return "\n".join(lines)


def weekly_report_text(report: WeeklyReport) -> str:
    lines = [
        "Weekly Activity Report",
        f"Period: {report.start.isoformat()} to {report.end.isoformat()}",
        "",
        "Summary:",
        f"Total Activities: {report.count}",
        f"Total Duration: {report.total_duration_min} minutes",
        f"Total Calories Burned: {report.total_calories:.1f}",
        "",
        "By Category:",
    ]
    for category, totals in report.by_category.items():
        lines.append(f"{category}:")
        lines.append(f"  Duration: {totals.duration_min} minutes")
        lines.append(f"  Calories: {totals.calories:.1f}")
    return "\n".join(lines)
