"""
Exercise profile.

An exercise is described by the handful of categorical fields the workout
generator filters on:

* **movement_pattern** — biomechanical category, drives strength selection
  and its fallback chain.
* **tags** — roles the exercise may fill (``strength``, ``accessory``,
  ``conditioning``).
* **difficulty** — the lowest experience level the exercise is programmed
  for.
* **equipment_ids** — equipment the exercise can be performed with.  An
  empty list means bodyweight; otherwise owning *any* listed item is enough.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from praxis.schemas.periodization import MovementPattern
from praxis.schemas.preferences import ExperienceLevel


class ExerciseProfile(BaseModel):
    """Static reference data for one exercise."""

    exercise_id: str = Field(..., description="Unique identifier, e.g. 'back_squat'")
    display_name: str
    movement_pattern: MovementPattern
    tags: list[str] = Field(default_factory=list)
    difficulty: ExperienceLevel = ExperienceLevel.BEGINNER
    equipment_ids: list[str] = Field(default_factory=list)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def equipment_satisfied(self, available: list[str] | None) -> bool:
        """True when the exercise needs no equipment or any required item is available."""
        if not self.equipment_ids:
            return True
        owned = set(available or [])
        return any(eq in owned for eq in self.equipment_ids)
