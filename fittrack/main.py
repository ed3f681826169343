import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from fittrack.config import settings
from fittrack.tracker.facade import FitnessTracker
from fittrack.tracker.router import router as tracker_router


def configure_logging() -> None:
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    tracker = FitnessTracker(settings.tracker_data_file, report_days=settings.tracker_report_days)
    # A failed load leaves the tracker empty; the error stays on tracker.last_load_error for /tracker/views.
    tracker.load()
    app.state.tracker = tracker
    yield
    tracker.quit()


app = FastAPI(title="FitTrack", version="0.1.0", lifespan=lifespan)
app.include_router(tracker_router)


@app.get("/")
async def root() -> dict:
    return {
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "tracker": {
            "catalog": "/tracker/catalog",
            "profile": "/tracker/profile",
            "activities": "/tracker/activities",
            "goals": "/tracker/goals",
            "weekly_report": "/tracker/reports/weekly",
            "export": "/tracker/export",
            "save": "/tracker/save",
            "views": "/tracker/views",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


def run() -> None:
    import uvicorn

    uvicorn.run("fittrack.main:app", host="127.0.0.1", port=8000)
