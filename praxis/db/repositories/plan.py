"""
Plan repositories.

Regeneration replaces whole entries: existing rows for the replaced week or
dates are deleted before the new ones are inserted, inside one commit, so a
date can never end up with two plan days.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from praxis.models.plan import PlanDayRow, WeeklyStructureRow


class WeeklyStructureRepository:
    """Repository for WeeklyStructureRow database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_week(self, user_id: str, week_start: datetime.date) -> Optional[WeeklyStructureRow]:
        statement = select(WeeklyStructureRow).where(WeeklyStructureRow.user_id == user_id,
                                                     WeeklyStructureRow.week_start == week_start, )
        return self.session.exec(statement).first()

    def replace(self, entry: WeeklyStructureRow) -> WeeklyStructureRow:
        existing = self.get_by_week(entry.user_id, entry.week_start)
        if existing is not None:
            self.session.delete(existing)
            self.session.flush()
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry


class PlanDayRepository:
    """Repository for PlanDayRow database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, plan_day_id: str) -> Optional[PlanDayRow]:
        return self.session.get(PlanDayRow, plan_day_id)

    def get_by_date(self, user_id: str, date: datetime.date) -> Optional[PlanDayRow]:
        statement = select(PlanDayRow).where(PlanDayRow.user_id == user_id, PlanDayRow.date == date)
        return self.session.exec(statement).first()

    def list_range(self, user_id: str, start: datetime.date, end: datetime.date) -> list[PlanDayRow]:
        statement = (select(PlanDayRow).where(PlanDayRow.user_id == user_id, PlanDayRow.date >= start,
                                              PlanDayRow.date <= end, ).order_by(PlanDayRow.date))
        return list(self.session.exec(statement).all())

    def list_all(self, user_id: str) -> list[PlanDayRow]:
        statement = select(PlanDayRow).where(PlanDayRow.user_id == user_id).order_by(PlanDayRow.date)
        return list(self.session.exec(statement).all())

    def replace_dates(self, user_id: str, entries: list[PlanDayRow]) -> list[PlanDayRow]:
        """Delete every row on the entries' dates (or with their ids), then insert the entries."""
        dates = [e.date for e in entries]
        ids = [e.id for e in entries]
        if entries:
            statement = select(PlanDayRow).where(
                (PlanDayRow.id.in_(ids)) | ((PlanDayRow.user_id == user_id) & (PlanDayRow.date.in_(dates))))
            for stale in self.session.exec(statement).all():
                self.session.delete(stale)
            self.session.flush()
        for entry in entries:
            self.session.add(entry)
        self.session.commit()
        for entry in entries:
            self.session.refresh(entry)
        return entries

    def replace_range(self, user_id: str, start: datetime.date, end: datetime.date,
                      entries: list[PlanDayRow]) -> list[PlanDayRow]:
        """Delete every row from ``start`` to ``end`` inclusive, then insert the entries."""
        for stale in self.list_range(user_id, start, end):
            self.session.delete(stale)
        self.session.flush()
        return self.replace_dates(user_id, entries)

    def delete(self, plan_day_id: str) -> None:
        entry = self.get_by_id(plan_day_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()

    def clear_for_user(self, user_id: str) -> None:
        for entry in self.list_all(user_id):
            self.session.delete(entry)
        self.session.commit()
