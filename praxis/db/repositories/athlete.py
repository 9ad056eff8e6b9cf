"""Preferences and recovery snapshot repositories."""

import datetime
from typing import Optional

from sqlmodel import Session, select

from praxis.models.athlete import PreferencesRow, RecoverySnapshotRow


class PreferencesRepository:
    def __init__(self, session: Session):
        self.session = session

    def get(self, user_id: str) -> Optional[PreferencesRow]:
        return self.session.get(PreferencesRow, user_id)

    def upsert(self, user_id: str, payload: dict) -> PreferencesRow:
        entry = self.get(user_id)
        if entry is None:
            entry = PreferencesRow(user_id=user_id, payload=payload)
        else:
            entry.payload = payload
            entry.updated_at = datetime.datetime.utcnow()
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry


class RecoverySnapshotRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_date(self, user_id: str, date: datetime.date) -> Optional[RecoverySnapshotRow]:
        statement = select(RecoverySnapshotRow).where(RecoverySnapshotRow.user_id == user_id,
                                                      RecoverySnapshotRow.date == date, )
        return self.session.exec(statement).first()

    def upsert(self, user_id: str, date: datetime.date, score: int, breakdown: dict) -> RecoverySnapshotRow:
        entry = self.get_by_date(user_id, date)
        if entry is None:
            entry = RecoverySnapshotRow(user_id=user_id, date=date, score=score, breakdown=breakdown)
        else:
            entry.score = score
            entry.breakdown = breakdown
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete_for_user(self, user_id: str) -> None:
        for entry in self.session.exec(select(RecoverySnapshotRow).where(RecoverySnapshotRow.user_id == user_id)):
            self.session.delete(entry)
        self.session.commit()
