"""User preference schemas."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TrainingGoal(str, Enum):
    STRENGTH = "strength"
    HYBRID = "hybrid"
    CONDITIONING = "conditioning"
    GENERAL = "general"


class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Units(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class StrengthNumbers(BaseModel):
    """Known one-rep maxes, in the user's units."""

    squat_1rm: Optional[float] = Field(None, gt=0)
    bench_1rm: Optional[float] = Field(None, gt=0)
    deadlift_1rm: Optional[float] = Field(None, gt=0)
    press_1rm: Optional[float] = Field(None, gt=0)


class UserPreferences(BaseModel):
    goal: TrainingGoal = TrainingGoal.GENERAL
    experience_level: ExperienceLevel = ExperienceLevel.INTERMEDIATE
    equipment_ids: list[str] = Field(default_factory=list)
    training_days_per_week: int = Field(4, ge=3, le=7)
    units: Units = Units.METRIC
    strength_numbers: StrengthNumbers = Field(default_factory=StrengthNumbers)


class UserPreferencesUpdate(BaseModel):
    goal: Optional[TrainingGoal] = None
    experience_level: Optional[ExperienceLevel] = None
    equipment_ids: Optional[list[str]] = None
    training_days_per_week: Optional[int] = Field(None, ge=3, le=7)
    units: Optional[Units] = None
    strength_numbers: Optional[StrengthNumbers] = None
