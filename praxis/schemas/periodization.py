"""
Periodization schemas.

Three distinct numeric spaces live side by side here and must not be
confused:

* pattern fatigue, 0–100 per movement pattern (``FatigueAnalysis.squat`` …),
* the ACWR *fatigue score*, 0–100 (``RecoveryBreakdown.acwr``),
* the raw ACWR *ratio*, unbounded and non-negative
  (``FatigueAnalysis.acwr_value``), classified into ``acwr_zone``.
"""

import datetime
from enum import Enum

from pydantic import BaseModel, Field


class ReadinessCategory(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class AcwrZone(str, Enum):
    UNDER = "under"
    OPTIMAL = "optimal"
    HIGH = "high"


class BlockType(str, Enum):
    """Periodization phase of a training week."""
    ACCUMULATION = "accumulation"
    INTENSIFICATION = "intensification"
    DELOAD = "deload"


class TargetLevel(str, Enum):
    """Volume / intensity target of a training day."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ConditioningTarget(str, Enum):
    LIGHT = "light"
    MIXED = "mixed"
    INTENSITY = "intensity"


class MovementPattern(str, Enum):
    """Biomechanical category of an exercise or of a training day."""
    SQUAT = "squat"
    HINGE = "hinge"
    LUNGE = "lunge"
    HORIZONTAL_PUSH = "horizontal_push"
    VERTICAL_PUSH = "vertical_push"
    HORIZONTAL_PULL = "horizontal_pull"
    VERTICAL_PULL = "vertical_pull"
    CARRY = "carry"
    CORE = "core"
    # Conditioning-focused day, no main lift.
    ENGINE = "engine"


class ReadinessAnalysis(BaseModel):
    score: float = Field(..., ge=0, le=100)
    category: ReadinessCategory


class FatigueAnalysis(BaseModel):
    """Per-pattern fatigue plus the ACWR ratio and its zone."""

    squat: float = Field(0.0, ge=0, le=100)
    hinge: float = Field(0.0, ge=0, le=100)
    push: float = Field(0.0, ge=0, le=100)
    pull: float = Field(0.0, ge=0, le=100)
    acwr_zone: AcwrZone = AcwrZone.OPTIMAL
    acwr_value: float = Field(0.0, ge=0, description="Raw acute / chronic load ratio (not the 0-100 score)")

    def pattern_fatigue(self, key: str | None) -> float:
        """Fatigue for a fatigue key (squat/hinge/push/pull); 0 for anything else."""
        if key in ("squat", "hinge", "push", "pull"):
            return getattr(self, key)
        return 0.0


class WeeklyDayStructure(BaseModel):
    """Skeleton of one training day inside a :class:`WeeklyStructure`."""

    date: datetime.date
    day_of_week: int = Field(..., ge=0, le=6, description="0 = Sunday … 6 = Saturday")
    main_movement_pattern: MovementPattern
    main_lift_category: str = Field(..., description="Display label, e.g. 'Bench'")
    volume_target: TargetLevel
    intensity_target: TargetLevel
    conditioning_target: ConditioningTarget
    block_type: BlockType
    fatigue_protected: bool = False


class WeeklyStructureMetadata(BaseModel):
    readiness: ReadinessAnalysis
    fatigue: FatigueAnalysis
    training_days_per_week: int = Field(..., ge=1, le=7)


class WeeklyStructure(BaseModel):
    """The current week's plan skeleton.  Replaced wholesale, never patched."""

    week_start: datetime.date = Field(..., description="Monday of the ISO week")
    days: list[WeeklyDayStructure] = Field(default_factory=list, max_length=6)
    block_type: BlockType
    metadata: WeeklyStructureMetadata
