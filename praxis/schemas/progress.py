"""Progress analytics schemas."""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from praxis.schemas.workout import ExerciseHistoryEntry


class VolumeTrend(str, Enum):
    HIGHER = "higher"
    LOWER = "lower"
    SAME = "same"


class VolumePoint(BaseModel):
    """Volume of one workout, for pattern and block charts."""

    date: datetime.date
    volume: float = Field(..., ge=0)
    start_time: int = Field(..., description="Epoch milliseconds, orders workouts of the same date")


class TrendPoint(BaseModel):
    """One session of an exercise chart, oldest first."""

    date: datetime.date
    label: str = Field(..., description="'Today', 'Yesterday', a weekday within the week, else 'Jan 5'")
    value: float


class ProgressSummary(BaseModel):
    workouts: int = Field(0, ge=0)
    volume_trend: VolumeTrend = VolumeTrend.SAME
    avg_rpe: Optional[float] = None
    avg_rest_sec: Optional[float] = None
    avg_intensity_score: float = Field(0.0, ge=0)
    avg_density_score: float = Field(0.0, ge=0)
    pattern_volume: dict[str, list[VolumePoint]] = Field(default_factory=dict,
                                                         description="Keyed by fatigue key (squat/hinge/push/pull)")


class ExerciseProgress(BaseModel):
    exercise_id: str
    name: str
    history: list[ExerciseHistoryEntry] = Field(default_factory=list, description="Newest first")
    weight: list[TrendPoint] = Field(default_factory=list)
    rpe: list[TrendPoint] = Field(default_factory=list)
    volume: list[TrendPoint] = Field(default_factory=list)
