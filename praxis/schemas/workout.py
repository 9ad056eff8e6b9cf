"""
Workout history schemas.

A :class:`WorkoutRecord` is written once, when a live session is finished,
and is never mutated afterwards.  The history is the only input of the
recovery / load analytics.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WorkoutBlockType(str, Enum):
    WARMUP = "warmup"
    STRENGTH = "strength"
    ACCESSORY = "accessory"
    CONDITIONING = "conditioning"
    COOLDOWN = "cooldown"


class SetLog(BaseModel):
    """One logged set of a finished workout."""

    model_config = ConfigDict(frozen=True)

    completed: bool = False
    weight: Optional[float] = Field(None, ge=0)
    rpe: Optional[float] = Field(None, ge=0, le=10)
    rest_time_ms: Optional[int] = Field(None, ge=0)


class CompletedBlock(BaseModel):
    """Summary of one block of a finished workout."""

    model_config = ConfigDict(frozen=True)

    block_id: str
    title: str
    type: WorkoutBlockType
    movement_pattern: Optional[str] = Field(None, description="Pattern tag written when the plan was generated")
    prescribed_sets: int = Field(0, ge=0)
    prescribed_reps: Optional[int] = None
    target_rpe: Optional[float] = None
    sets: list[SetLog] = Field(default_factory=list)
    volume: float = Field(0.0, ge=0)
    avg_rpe: Optional[float] = None
    avg_rest_sec: Optional[float] = None


class WorkoutRecord(BaseModel):
    """A finished workout."""

    model_config = ConfigDict(frozen=True)

    id: str
    plan_day_id: str
    date: datetime.date
    start_time: int = Field(..., description="Epoch milliseconds")
    end_time: int = Field(..., description="Epoch milliseconds")
    duration_min: float = Field(0.0, ge=0)
    blocks: list[CompletedBlock] = Field(default_factory=list)
    total_volume: float = Field(0.0, ge=0)
    avg_rpe: Optional[float] = None
    avg_rest_sec: Optional[float] = None
    density_score: float = Field(0.0, ge=0)
    intensity_score: float = Field(0.0, ge=0)


class ExerciseHistoryEntry(BaseModel):
    """One completed set of a main lift, used for weight progression."""

    date: datetime.date
    exercise_id: str
    block_id: str
    session_id: str
    weight: float = Field(..., gt=0)
    reps: int = Field(..., ge=0)
    sets: int = Field(1, ge=1)
    rpe: float = Field(..., ge=0, le=10)
    volume: float = Field(0.0, ge=0)
