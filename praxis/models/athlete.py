"""
Athlete state database models.

Preferences (one row per user) and the cached recovery score of a
calendar day.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, SQLModel


class PreferencesRow(SQLModel, table=True):
    __tablename__ = "preferences"

    user_id: str = Field(primary_key=True, max_length=64)
    payload: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False), )
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class RecoverySnapshotRow(SQLModel, table=True):
    __tablename__ = "recovery_snapshots"
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_recovery_user_date"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, max_length=64, index=True)
    date: datetime.date = Field(nullable=False, index=True)
    score: int = Field(nullable=False, ge=0, le=100)
    breakdown: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False), )
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
