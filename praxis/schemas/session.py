"""
Live session schemas.

The live session is in-memory state: it is created at "start", mutated set
by set, and either converted into a ``WorkoutRecord`` at "finish" or thrown
away at "cancel".
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from praxis.schemas.autoregulation import AutoRegRecommendation, SetSuggestion
from praxis.schemas.periodization import BlockType
from praxis.schemas.plan import WorkoutBlock


class AdjustmentMetadata(BaseModel):
    level: Literal["under", "moderate", "high"]
    reason: str


class SessionSet(BaseModel):
    completed: bool = False
    weight: Optional[float] = Field(None, gt=0)
    rpe: Optional[float] = Field(None, ge=0, le=10)
    rest_time_ms: Optional[int] = Field(None, ge=0)
    recommended_weight: Optional[float] = None


class LiveSessionState(BaseModel):
    plan_day_id: str
    plan_date: datetime.date
    start_time: int = Field(..., description="Epoch milliseconds")
    end_time: Optional[int] = None
    current_block_index: int = 0
    completed_blocks: list[str] = Field(default_factory=list)
    completed_sets: dict[str, list[SessionSet]] = Field(default_factory=dict)
    blocks: list[WorkoutBlock] = Field(default_factory=list)
    original_blocks: list[WorkoutBlock] = Field(default_factory=list)
    adjustment_metadata: Optional[AdjustmentMetadata] = None
    recovery_score: Optional[int] = None
    block_type: Optional[BlockType] = None
    # "<block_id>:<set_index>" -> timer start, epoch milliseconds
    rest_timers: dict[str, int] = Field(default_factory=dict)


# ======================================================================
# Requests / responses
# ======================================================================


class StartSessionRequest(BaseModel):
    date: Optional[datetime.date] = Field(None, description="Plan date; defaults to today")


class SetWeightRequest(BaseModel):
    weight: Optional[float] = Field(None, ge=0, description="0 or null clears the weight")


class SetRpeRequest(BaseModel):
    rpe: Optional[float] = Field(None, ge=0, le=10)


class CompleteSetResponse(BaseModel):
    session: LiveSessionState
    recommendation: Optional[AutoRegRecommendation] = None
    suggestion: Optional[SetSuggestion] = None
