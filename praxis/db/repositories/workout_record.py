"""
Workout history repositories.

The workout history is append-only: there is no update method, only
``create`` and a full ``clear``.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from praxis.models.workout_record import ProgressionEntryRow, WorkoutRecordRow


class WorkoutRecordRepository:
    """Repository for WorkoutRecordRow database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: WorkoutRecordRow, commit: bool = True) -> WorkoutRecordRow:
        self.session.add(entry)
        if commit:
            self.session.commit()
            self.session.refresh(entry)
        return entry

    def get_by_id(self, record_id: str) -> Optional[WorkoutRecordRow]:
        statement = select(WorkoutRecordRow).where(WorkoutRecordRow.id == record_id)
        return self.session.exec(statement).first()

    def list_for_user(self, user_id: str) -> list[WorkoutRecordRow]:
        """All records in insertion order."""
        statement = select(WorkoutRecordRow).where(WorkoutRecordRow.user_id == user_id).order_by(
            WorkoutRecordRow.row_id)
        return list(self.session.exec(statement).all())

    def list_for_user_since(self, user_id: str, since: datetime.date) -> list[WorkoutRecordRow]:
        statement = (select(WorkoutRecordRow).where(WorkoutRecordRow.user_id == user_id,
                                                    WorkoutRecordRow.date >= since, ).order_by(
            WorkoutRecordRow.row_id))
        return list(self.session.exec(statement).all())

    def clear_for_user(self, user_id: str) -> None:
        for entry in self.list_for_user(user_id):
            self.session.delete(entry)
        self.session.commit()


class ProgressionRepository:
    """Repository for ProgressionEntryRow database operations."""

    def __init__(self, session: Session):
        self.session = session

    def add_many(self, entries: list[ProgressionEntryRow], commit: bool = True) -> None:
        for entry in entries:
            self.session.add(entry)
        if commit:
            self.session.commit()

    def list_for_user(self, user_id: str) -> list[ProgressionEntryRow]:
        statement = (select(ProgressionEntryRow).where(ProgressionEntryRow.user_id == user_id).order_by(
            ProgressionEntryRow.date, ProgressionEntryRow.id))
        return list(self.session.exec(statement).all())

    def list_for_exercise(self, user_id: str, exercise_id: str) -> list[ProgressionEntryRow]:
        statement = (select(ProgressionEntryRow).where(ProgressionEntryRow.user_id == user_id,
                                                       ProgressionEntryRow.exercise_id == exercise_id, ).order_by(
            ProgressionEntryRow.date, ProgressionEntryRow.id))
        return list(self.session.exec(statement).all())

    def clear_for_user(self, user_id: str) -> None:
        statement = select(ProgressionEntryRow).where(ProgressionEntryRow.user_id == user_id)
        for entry in self.session.exec(statement).all():
            self.session.delete(entry)
        self.session.commit()
