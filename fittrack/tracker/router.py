"""Tracker HTTP router — the local surface the desktop UI drives.

One route per facade operation. Tracker errors become HTTP errors with a
{"kind", "message"} detail so the UI can pick the right dialog.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from fittrack.config import settings
from fittrack.tracker import catalog, views
from fittrack.tracker.errors import Result
from fittrack.tracker.facade import FitnessTracker
from fittrack.tracker.models import TrackerViews

router = APIRouter(prefix="/tracker", tags=["tracker"])

STATUS_BY_KIND = {
    "InvalidInput": 422,
    "ProfileRequired": 409,
    "EmptyState": 404,
    "PersistenceError": 500,
}


def get_tracker(request: Request) -> FitnessTracker:
    return request.app.state.tracker


def _unwrap(result: Result) -> Any:
    if result.error is not None:
        raise HTTPException(
            status_code=STATUS_BY_KIND.get(result.error.kind, 400),
            detail={"kind": result.error.kind, "message": result.error.message},
        )
    return result.value


# Form bodies stay loosely typed: parsing and range checks belong to the tracker.


class ProfileForm(BaseModel):
    name: Any = None
    age: Any = None
    weight_kg: Any = None
    height_cm: Any = None


class ActivityForm(BaseModel):
    category: Any = None
    activity_type: Any = None
    duration_min: Any = None


class GoalForm(BaseModel):
    goal_type: Any = None
    target: Any = None
    duration_days: Any = None


class ExportForm(BaseModel):
    path: str | None = None


# ---------------------------------------------------------------------------
# /tracker/catalog
# ---------------------------------------------------------------------------


@router.get("/catalog")
async def get_catalog() -> dict:
    return {
        "categories": {c: catalog.types_for(c) for c in catalog.list_categories()},
        "goal_types": catalog.list_goal_types(),
    }


# ---------------------------------------------------------------------------
# /tracker/profile
# ---------------------------------------------------------------------------


@router.get("/profile")
async def profile_detail(tracker: FitnessTracker = Depends(get_tracker)) -> dict:
    profile = _unwrap(tracker.get_profile())
    return {
        "profile": profile.model_dump(mode="json") if profile is not None else None,
        "summary": views.profile_summary(profile),
    }


@router.put("/profile")
async def profile_set(form: ProfileForm, tracker: FitnessTracker = Depends(get_tracker)) -> dict:
    result = tracker.set_profile(form.name, form.age, form.weight_kg, form.height_cm)
    profile = _unwrap(result)
    return {
        "profile": profile.model_dump(mode="json"),
        "bmi": round(profile.bmi, 1),
        "bmi_category": profile.bmi_category,
        "summary": views.profile_summary(profile),
        "status": result.status,
    }


# ---------------------------------------------------------------------------
# /tracker/activities
# ---------------------------------------------------------------------------


@router.get("/activities")
async def activities_list(tracker: FitnessTracker = Depends(get_tracker)) -> dict:
    activities = _unwrap(tracker.list_activities())
    return {
        "columns": list(views.ACTIVITY_COLUMNS),
        "rows": [views.activity_row(a) for a in activities],
        "activities": [a.model_dump(mode="json") for a in activities],
    }


@router.post("/activities", status_code=201)
async def activity_log(form: ActivityForm, tracker: FitnessTracker = Depends(get_tracker)) -> dict:
    result = tracker.log_activity(form.category, form.activity_type, form.duration_min)
    activity = _unwrap(result)
    return {
        "activity": activity.model_dump(mode="json"),
        "line": views.activity_line(activity),
        "status": result.status,
    }


# ---------------------------------------------------------------------------
# /tracker/goals
# ---------------------------------------------------------------------------


@router.get("/goals")
async def goals_list(tracker: FitnessTracker = Depends(get_tracker)) -> dict:
    goals = _unwrap(tracker.list_goals())
    return {
        "goals": [g.model_dump(mode="json") for g in goals],
        "lines": [views.goal_line(g) for g in goals],
        "overview": views.goals_overview(goals),
    }


@router.post("/goals", status_code=201)
async def goal_set(form: GoalForm, tracker: FitnessTracker = Depends(get_tracker)) -> dict:
    result = tracker.set_goal(form.goal_type, form.target, form.duration_days)
    goal = _unwrap(result)
    return {
        "goal": goal.model_dump(mode="json"),
        "line": views.goal_line(goal),
        "status": result.status,
    }


# ---------------------------------------------------------------------------
# /tracker/reports, /tracker/export, /tracker/save, /tracker/views
# ---------------------------------------------------------------------------


@router.get("/reports/weekly")
async def weekly_report(tracker: FitnessTracker = Depends(get_tracker)) -> dict:
    report = _unwrap(tracker.weekly_report())
    return {
        "report": report.model_dump(mode="json"),
        "text": views.weekly_report_text(report),
    }


@router.post("/export")
async def export_csv(form: ExportForm, tracker: FitnessTracker = Depends(get_tracker)) -> dict:
    result = tracker.export_csv(form.path or settings.tracker_export_file)
    path = _unwrap(result)
    return {"path": str(path), "status": result.status}


@router.post("/save")
async def save(tracker: FitnessTracker = Depends(get_tracker)) -> dict:
    result = tracker.save()
    _unwrap(result)
    return {"path": str(tracker.data_file), "status": result.status}


@router.get("/views", response_model=TrackerViews)
async def current_views(tracker: FitnessTracker = Depends(get_tracker)) -> TrackerViews:
    return tracker.views()
