"""
Workout history database models.

Finished workouts and main-lift progression entries.  Nested engine values
(blocks, sets) are stored as JSON payloads; the columns the engine filters
on (date, exercise) are plain indexed columns.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class WorkoutRecordRow(SQLModel, table=True):
    """An immutable finished workout (append-only)."""

    __tablename__ = "workout_records"

    # Autoincrement key doubles as the insertion order of the history
    row_id: Optional[int] = Field(default=None, primary_key=True)
    id: str = Field(nullable=False, max_length=64, unique=True, index=True)
    user_id: str = Field(nullable=False, max_length=64, index=True)
    plan_day_id: str = Field(nullable=False, max_length=64)
    date: datetime.date = Field(nullable=False, index=True)

    # Full WorkoutRecord as produced by the engine
    payload: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False), )

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class ProgressionEntryRow(SQLModel, table=True):
    """One completed main-lift set, used to recommend the next starting weight."""

    __tablename__ = "progression_entries"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, max_length=64, index=True)
    exercise_id: str = Field(nullable=False, max_length=64, index=True)
    session_id: str = Field(nullable=False, max_length=64)
    block_id: str = Field(nullable=False, max_length=64)
    date: datetime.date = Field(nullable=False, index=True)

    weight: float = Field(nullable=False)
    reps: int = Field(nullable=False)
    sets: int = Field(default=1, nullable=False)
    rpe: float = Field(nullable=False)
    volume: float = Field(default=0.0, nullable=False)
