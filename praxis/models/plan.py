"""
Plan database models.

* :class:`WeeklyStructureRow` — one row per ISO week, replaced wholesale on
  regeneration.
* :class:`PlanDayRow` — one row per (user, date); regenerating a date
  replaces its row, it never adds a second one.
"""

import datetime

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, SQLModel


class WeeklyStructureRow(SQLModel, table=True):
    __tablename__ = "weekly_structures"
    __table_args__ = (UniqueConstraint("user_id", "week_start", name="uq_weekly_structure_user_week"),)

    id: int | None = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, max_length=64, index=True)
    week_start: datetime.date = Field(nullable=False, index=True)
    block_type: str = Field(nullable=False, max_length=20)
    payload: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False), )
    generated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class PlanDayRow(SQLModel, table=True):
    __tablename__ = "plan_days"
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_plan_day_user_date"),)

    id: str = Field(primary_key=True, max_length=64)
    user_id: str = Field(nullable=False, max_length=64, index=True)
    date: datetime.date = Field(nullable=False, index=True)
    payload: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False), )
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
