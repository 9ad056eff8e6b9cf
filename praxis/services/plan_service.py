"""
Plan service.

Turns the current weekly structure into concrete plan days.  The plan is
keyed by date: generating a week (or a single day) replaces the entries for
those dates, so a date never holds two plan days.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from praxis.core.config import settings
from praxis.db.repositories.plan import PlanDayRepository
from praxis.generation.daily import generate_daily_workout
from praxis.models.plan import PlanDayRow
from praxis.periodization.weekly_structure import week_start_for
from praxis.schemas.periodization import WeeklyDayStructure, WeeklyStructure
from praxis.schemas.plan import WorkoutPlanDay
from praxis.services.periodization_service import PeriodizationService
from praxis.services.preferences_service import PreferencesService

logger = logging.getLogger(__name__)


class PlanService:
    """Service for date-keyed workout plan days."""

    def __init__(self, session: Session, user_id: str = settings.DEFAULT_USER_ID,
                 periodization: Optional[PeriodizationService] = None,
                 preferences: Optional[PreferencesService] = None, ):
        self.user_id = user_id
        self.preferences = preferences or PreferencesService(session, user_id)
        self.periodization = periodization or PeriodizationService(session, user_id, preferences=self.preferences)
        self.repository = PlanDayRepository(session)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate_week(self, as_of: Optional[datetime.date] = None, regenerate_structure: bool = False,
                      ) -> list[WorkoutPlanDay]:
        """Generate one plan day per day of the week's structure.

        Every stored plan day of the Monday–Sunday week is replaced, so days
        dropped from the structure do not linger.
        """
        day = as_of or datetime.date.today()
        if regenerate_structure:
            structure = self.periodization.regenerate_week(day)
        else:
            structure = self.periodization.get_current_week(day)

        preferences = self.preferences.get()
        plan_days = [generate_daily_workout(preferences, weekly_day.date, index, weekly_day, self.user_id)
                     for index, weekly_day in enumerate(structure.days)]
        week_end = structure.week_start + datetime.timedelta(days=6)
        self.repository.replace_range(self.user_id, structure.week_start, week_end,
                                      [self._to_row(p) for p in plan_days])
        if not plan_days:
            logger.warning("Weekly structure for %s has no days, no plan generated", structure.week_start)
            return []

        logger.info("Generated %d plan days for week of %s", len(plan_days), structure.week_start.isoformat())
        return plan_days

    def regenerate_day(self, date: datetime.date) -> WorkoutPlanDay:
        """Regenerate the plan day of one date, replacing any existing entry."""
        structure = self.periodization.get_current_week(date)
        weekly_day, day_index = self._find_weekly_day(structure, date)
        if weekly_day is None:
            # Not a structured training day: generate from the goal alone
            logger.debug("No weekly day for %s, generating from goal", date.isoformat())

        plan_day = generate_daily_workout(self.preferences.get(), date, day_index, weekly_day, self.user_id)
        self.repository.replace_dates(self.user_id, [self._to_row(plan_day)])
        return plan_day

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_by_date(self, date: datetime.date) -> WorkoutPlanDay:
        entry = self.repository.get_by_date(self.user_id, date)
        if not entry:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND,
                                detail=f"No plan day for {date.isoformat()}", )
        return self._to_plan_day(entry)

    def find_by_date(self, date: datetime.date) -> Optional[WorkoutPlanDay]:
        entry = self.repository.get_by_date(self.user_id, date)
        return self._to_plan_day(entry) if entry else None

    def get_by_id(self, plan_day_id: str) -> WorkoutPlanDay:
        entry = self.repository.get_by_id(plan_day_id)
        if not entry or entry.user_id != self.user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan day not found", )
        return self._to_plan_day(entry)

    def get_range(self, start: datetime.date, end: datetime.date) -> list[WorkoutPlanDay]:
        return [self._to_plan_day(e) for e in self.repository.list_range(self.user_id, start, end)]

    def get_all(self) -> list[WorkoutPlanDay]:
        return [self._to_plan_day(e) for e in self.repository.list_all(self.user_id)]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_plan_day(self, plan_day: WorkoutPlanDay) -> WorkoutPlanDay:
        """Store a plan day, replacing any entry with the same id or date."""
        self.repository.replace_dates(self.user_id, [self._to_row(plan_day)])
        return plan_day

    def remove_plan_day(self, plan_day_id: str) -> None:
        self.get_by_id(plan_day_id)
        self.repository.delete(plan_day_id)

    def clear(self) -> None:
        self.repository.clear_for_user(self.user_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _find_weekly_day(structure: WeeklyStructure,
                         date: datetime.date, ) -> tuple[Optional[WeeklyDayStructure], int]:
        for index, weekly_day in enumerate(structure.days):
            if weekly_day.date == date:
                return weekly_day, index
        return None, (date - week_start_for(date)).days

    def _to_row(self, plan_day: WorkoutPlanDay) -> PlanDayRow:
        return PlanDayRow(id=plan_day.id, user_id=self.user_id, date=plan_day.date,
                          payload=plan_day.model_dump(mode="json"), created_at=plan_day.created_at, )

    @staticmethod
    def _to_plan_day(entry: PlanDayRow) -> WorkoutPlanDay:
        return WorkoutPlanDay.model_validate(entry.payload)
