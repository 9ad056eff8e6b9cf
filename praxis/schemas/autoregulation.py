"""
Auto-regulation schemas.

Each completed set yields one immutable :class:`SetPerformanceEvent` and
optionally one :class:`SetSuggestion` for the following set.  A suggestion
is superseded by a newer one for the same set, and cleared when the user
edits that set's weight or un-completes the set that produced it.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from praxis.schemas.periodization import BlockType


class Difficulty(str, Enum):
    TOO_EASY = "too_easy"
    ON_TARGET = "on_target"
    TOO_HARD = "too_hard"


class SetPerformance(BaseModel):
    """What the athlete just did."""

    weight: Optional[float] = None
    reps: Optional[int] = None
    rpe: Optional[float] = Field(None, ge=0, le=10)
    difficulty: Optional[Difficulty] = None


class AutoRegContext(BaseModel):
    recovery_score: Optional[float] = Field(None, ge=0, le=100)
    block_type: Optional[BlockType] = None
    movement_pattern: Optional[str] = None
    set_index: int = Field(0, ge=0)
    total_sets: int = Field(1, ge=1)
    target_rpe: Optional[float] = None
    is_final_set: bool = False


class AutoRegFlags(BaseModel):
    performance_boost: bool = False
    fatigue_detected: bool = False
    auto_deload_suggested: bool = False


class AutoRegRecommendation(BaseModel):
    next_weight: Optional[float] = None
    # Reps are never auto-adjusted.
    next_reps: Optional[int] = None
    reason: str
    flags: AutoRegFlags = Field(default_factory=AutoRegFlags)
    recovery_bias: float = 0.0
    difficulty_bias: float = 0.0
    total_bias: float = 0.0


class SetPerformanceEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    plan_day_id: str
    block_id: str
    set_index: int = Field(..., ge=0)
    exercise_id: Optional[str] = None
    weight: Optional[float] = None
    reps: Optional[int] = None
    rpe: Optional[float] = None
    target_rpe: Optional[float] = None
    difficulty: Difficulty
    recovery_score: Optional[float] = None
    block_type: Optional[BlockType] = None
    recommended_weight: Optional[float] = None
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class SetSuggestion(BaseModel):
    plan_day_id: str
    block_id: str
    set_index: int = Field(..., ge=0, description="Index of the set the suggestion is for")
    suggested_weight: float = Field(..., gt=0)
    reason: str
    flags: AutoRegFlags = Field(default_factory=AutoRegFlags)
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
