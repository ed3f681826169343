"""Local data file — versioned JSON, atomic writes.

Layout (UTF-8 JSON):
  {"magic": "FITTRACK", "version": 1,
   "profile": {...} | null, "activities": [...], "goals": [...]}

Writes go to a temporary file in the same directory which is fsync'd and
then renamed over the target, so the previous file survives any failure.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from fittrack.tracker.errors import PersistenceError
from fittrack.tracker.models import Activity, Goal, Profile, TrackerState

MAGIC = "FITTRACK"
FORMAT_VERSION = 1


class DataFile(BaseModel):
    magic: str = MAGIC
    version: int = FORMAT_VERSION
    profile: Profile | None = None
    activities: list[Activity] = Field(default_factory=list)
    goals: list[Goal] = Field(default_factory=list)


def load(path: str | os.PathLike[str]) -> TrackerState:
    """Read state from `path`. A missing file yields empty state.

    Raises PersistenceError for unreadable files, malformed JSON, a wrong
    magic header, an unknown version, or records that fail validation.
    """
    p = Path(path)
    if not p.exists():
        logger.info(f"No data file at {p}; starting with empty state")
        return TrackerState()

    try:
        raw = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PersistenceError(f"Error loading data: {e}") from e

    try:
        header = json.loads(raw)
    except json.JSONDecodeError as e:
        raise PersistenceError(f"Error loading data: corrupt file ({e})") from e

    if not isinstance(header, dict) or header.get("magic") != MAGIC:
        raise PersistenceError(f"Error loading data: {p} is not a fitness tracker data file")
    if header.get("version") != FORMAT_VERSION:
        raise PersistenceError(
            f"Error loading data: unsupported format version {header.get('version')!r}"
        )

    try:
        doc = DataFile.model_validate(header)
    except ValidationError as e:
        raise PersistenceError(f"Error loading data: invalid records ({e.error_count()} errors)") from e

    logger.info(
        f"Loaded {p}: profile={'set' if doc.profile else 'unset'}, "
        f"{len(doc.activities)} activities, {len(doc.goals)} goals"
    )
    return TrackerState(profile=doc.profile, activities=doc.activities, goals=doc.goals)


def save(state: TrackerState, path: str | os.PathLike[str]) -> None:
    """Write all three sections or nothing. Raises PersistenceError on I/O failure."""
    p = Path(path)
    doc = DataFile(profile=state.profile, activities=state.activities, goals=state.goals)
    payload = doc.model_dump_json(indent=2)

    directory = p.parent if str(p.parent) else Path(".")
    tmp_name: str | None = None
    try:
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{p.name}.", suffix=".tmp", dir=directory)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, p)
        tmp_name = None
    except OSError as e:
        raise PersistenceError(f"Error saving data: {e}") from e
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)

    logger.info(f"Saved {p}: {len(state.activities)} activities, {len(state.goals)} goals")
