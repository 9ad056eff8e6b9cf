"""Recovery score schemas."""

import datetime

from pydantic import BaseModel, Field

from praxis.schemas.periodization import ReadinessAnalysis


class PatternFatigue(BaseModel):
    squat: float = Field(0.0, ge=0, le=100)
    hinge: float = Field(0.0, ge=0, le=100)
    push: float = Field(0.0, ge=0, le=100)
    pull: float = Field(0.0, ge=0, le=100)
    average: float = Field(0.0, ge=0, le=100)


class RecoveryBreakdown(BaseModel):
    """Fatigue components behind a recovery score (all 0–100, higher = more tired)."""

    acwr: float = Field(0.0, ge=0, le=100, description="ACWR fatigue score, not the raw ratio")
    movement_pattern_fatigue: PatternFatigue = Field(default_factory=PatternFatigue)
    intensity_fatigue: float = Field(0.0, ge=0, le=100)
    rest_fatigue: float = Field(0.0, ge=0, le=100)


class RecoveryScore(BaseModel):
    score: int = Field(..., ge=0, le=100)
    breakdown: RecoveryBreakdown = Field(default_factory=RecoveryBreakdown)


class RecoveryResponse(BaseModel):
    date: datetime.date
    score: int
    breakdown: RecoveryBreakdown
    readiness: ReadinessAnalysis
