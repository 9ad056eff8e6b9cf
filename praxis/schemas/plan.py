"""
Workout plan schemas.

A :class:`WorkoutPlanDay` is an ordered list of blocks, discriminated by
``type``::

    warmup → strength → accessory → conditioning → cooldown

A strength block whose ``strength_main`` is ``None`` is the explicit
"no eligible exercise" sentinel; every other strength block carries at
least one set.
"""

import datetime
import uuid
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from praxis.schemas.periodization import BlockType, MovementPattern


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


# ======================================================================
# Prescriptions
# ======================================================================


class SetPrescription(BaseModel):
    target_reps: int = Field(..., ge=1)
    target_rpe: Optional[float] = Field(None, ge=1, le=10)
    target_percent_1rm: Optional[float] = Field(None, ge=0, le=1)
    target_weight: Optional[float] = Field(None, gt=0, description="1RM × %1RM when a 1RM is known")


class StrengthPrescription(BaseModel):
    exercise_id: str
    sets: list[SetPrescription] = Field(..., min_length=1)
    wave: str
    rpe: float = Field(..., ge=1, le=10)
    percent: float = Field(..., ge=0, le=1)
    one_rm_used: Optional[float] = None


class AccessoryPrescription(BaseModel):
    exercise_id: str
    sets: list[SetPrescription] = Field(..., min_length=1)


class ConditioningStation(BaseModel):
    name: str
    work_seconds: Optional[int] = None
    distance_m: Optional[int] = None
    reps: Optional[int] = None


class ConditioningPrescription(BaseModel):
    mode: Literal["steady", "interval", "stations"]
    modality: Literal["row", "bike", "ski", "run"]
    work_seconds: int = Field(..., ge=0)
    rest_seconds: Optional[int] = Field(None, ge=0)
    rounds: int = Field(1, ge=1)
    target_zone: str = Field(..., pattern=r"^Z[1-5]$")
    stations: list[ConditioningStation] = Field(default_factory=list)


# ======================================================================
# Blocks
# ======================================================================


class _BlockBase(BaseModel):
    id: str
    title: str
    estimated_duration_minutes: int = Field(0, ge=0)


class WarmupBlock(_BlockBase):
    type: Literal["warmup"] = "warmup"
    items: list[str] = Field(default_factory=list)


class StrengthBlock(_BlockBase):
    type: Literal["strength"] = "strength"
    movement_pattern: Optional[MovementPattern] = None
    strength_main: Optional[StrengthPrescription] = None


class AccessoryBlock(_BlockBase):
    type: Literal["accessory"] = "accessory"
    accessory: list[AccessoryPrescription] = Field(default_factory=list)


class ConditioningBlock(_BlockBase):
    type: Literal["conditioning"] = "conditioning"
    conditioning: ConditioningPrescription


class CooldownBlock(_BlockBase):
    type: Literal["cooldown"] = "cooldown"
    items: list[str] = Field(default_factory=list)


WorkoutBlock = Annotated[
    Union[WarmupBlock, StrengthBlock, AccessoryBlock, ConditioningBlock, CooldownBlock],
    Field(discriminator="type"),
]


class WorkoutPlanDay(BaseModel):
    id: str = Field(default_factory=lambda: new_id("plan"))
    user_id: str
    date: datetime.date
    day_index: int = Field(..., ge=0)
    focus_tags: list[str] = Field(default_factory=list)
    blocks: list[WorkoutBlock] = Field(default_factory=list)
    estimated_duration_minutes: int = Field(0, ge=0)
    adjusted_for_readiness: bool = False
    block_type: Optional[BlockType] = None
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
