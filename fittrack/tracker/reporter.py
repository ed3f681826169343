"""Read-only reporting over the activity log — weekly summary and CSV export.

Both functions return None for an empty log; callers turn that into a
user-visible message.
"""

from __future__ import annotations

import csv
import io
from datetime import date, timedelta

from fittrack.tracker.models import Activity, CategoryTotals, WeeklyReport

CSV_HEADER = ("Date", "Type", "Category", "Duration", "Calories")


def week_window(today: date, days: int = 7) -> tuple[date, date]:
    """Inclusive [today - days, today]."""
    return today - timedelta(days=days), today


def weekly_report(activities: list[Activity], today: date, days: int = 7) -> WeeklyReport | None:
    """Totals and per-category sums for activities dated inside the window.

    Categories appear in order of first appearance; categories with no
    activity in the window are absent.
    """
    if not activities:
        return None

    start, end = week_window(today, days)
    in_window = [a for a in activities if start <= a.date <= end]

    by_category: dict[str, CategoryTotals] = {}
    total_duration = 0
    total_calories = 0.0
    for a in in_window:
        bucket = by_category.setdefault(a.category, CategoryTotals())
        bucket.duration_min += a.duration_min
        bucket.calories += a.calories
        total_duration += a.duration_min
        total_calories += a.calories

    return WeeklyReport(
        start=start,
        end=end,
        activities=in_window,
        count=len(in_window),
        total_duration_min=total_duration,
        total_calories=round(total_calories, 1),
        by_category=by_category,
    )


def csv_rows(activities: list[Activity]) -> list[list[str]]:
    return [
        [
            a.date.isoformat(),
            a.activity_type,
            a.category,
            str(a.duration_min),
            f"{a.calories:.1f}",
        ]
        for a in activities
    ]


def csv_export(activities: list[Activity]) -> str | None:
    """Header plus one row per activity in log order. Fields are quoted only when needed."""
    if not activities:
        return None
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(CSV_HEADER)
    writer.writerows(csv_rows(activities))
    return buf.getvalue()
