"""Error kinds raised by tracker components and the tagged Facade result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import ValidationError

T = TypeVar("T")


class TrackerError(Exception):
    """Base exception for tracker errors.

    Attributes:
        kind: Stable identifier the UI maps to a message
        message: Human-readable description
    """

    kind = "TrackerError"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInput(TrackerError):
    """Raised when a field cannot be parsed, is out of range, or names an unknown value."""

    kind = "InvalidInput"

    @classmethod
    def from_validation(cls, exc: ValidationError) -> InvalidInput:
        parts = []
        for err in exc.errors():
            loc = ".".join(str(p) for p in err.get("loc", ())) or "value"
            parts.append(f"{loc}: {err.get('msg', 'invalid')}")
        return cls("; ".join(parts) or "Invalid input")


class ProfileRequired(TrackerError):
    """Raised when logging an activity or setting a goal before a profile exists."""

    kind = "ProfileRequired"

    def __init__(self, message: str = "Please set up a user profile first.") -> None:
        super().__init__(message)


class EmptyState(TrackerError):
    """Raised when a report or export is requested with no activities."""

    kind = "EmptyState"


class PersistenceError(TrackerError):
    """Raised when the data file cannot be read or written."""

    kind = "PersistenceError"


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """Outcome of a Facade operation: a value, or a tracker error, never both."""

    value: T | None = None
    error: TrackerError | None = None
    status: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> str | None:
        return self.error.kind if self.error is not None else None

    @classmethod
    def success(cls, value: T | None = None, status: str = "") -> Result[T]:
        return cls(value=value, status=status)

    @classmethod
    def failure(cls, error: TrackerError) -> Result[T]:
        return cls(error=error, status=error.message)
