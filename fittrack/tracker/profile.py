"""Single user profile — set, read, summarize."""

from __future__ import annotations

from typing import Any

from loguru import logger
from pydantic import ValidationError

from fittrack.tracker import views
from fittrack.tracker.errors import InvalidInput
from fittrack.tracker.models import Profile


class ProfileStore:
    """Holds zero or one Profile. Once set it can be replaced but never cleared."""

    def __init__(self, profile: Profile | None = None) -> None:
        self._profile = profile

    def set(self, name: Any, age: Any, weight_kg: Any, height_cm: Any) -> Profile:
        """Validate the raw form values and replace the current profile.

        Raises InvalidInput when a value is missing, non-numeric or out of range;
        the previous profile is kept in that case.
        """
        try:
            profile = Profile(name=name, age=age, weight_kg=weight_kg, height_cm=height_cm)
        except ValidationError as exc:
            raise InvalidInput.from_validation(exc) from exc
        self._profile = profile
        logger.info(f"Profile set for {profile.name}: BMI {profile.bmi:.1f} ({profile.bmi_category})")
        return profile

    def get(self) -> Profile | None:
        return self._profile

    @property
    def is_set(self) -> bool:
        return self._profile is not None

    def summary(self) -> str:
        return views.profile_summary(self._profile)
