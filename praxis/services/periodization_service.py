"""
Periodization service.

Owns the "current" weekly structure.  Exactly one structure is stored per
ISO week; it is built on first access in a new week and replaced wholesale
on an explicit regeneration.

Regeneration is best-effort: any failure while analysing the history or
building the week is logged and a neutral structure (no days, accumulation)
is stored instead of surfacing an error.
"""

import datetime
import logging
from typing import Optional

from sqlmodel import Session

from praxis.core.config import settings
from praxis.db.repositories.plan import WeeklyStructureRepository
from praxis.models.plan import WeeklyStructureRow
from praxis.periodization.block_type import infer_block_type
from praxis.periodization.fatigue import analyze_fatigue
from praxis.periodization.readiness import analyze_readiness
from praxis.periodization.weekly_structure import build_weekly_structure, week_start_for
from praxis.schemas.periodization import BlockType, FatigueAnalysis, WeeklyStructure, WeeklyStructureMetadata
from praxis.services.history_service import HistoryService
from praxis.services.preferences_service import PreferencesService
from praxis.services.recovery_service import RecoveryService

logger = logging.getLogger(__name__)


def neutral_weekly_structure(week_start: datetime.date,
                             training_days_per_week: int = settings.DEFAULT_TRAINING_DAYS_PER_WEEK, ) -> WeeklyStructure:
    """Fallback structure stored when generation fails."""
    return WeeklyStructure(week_start=week_start_for(week_start), days=[], block_type=BlockType.ACCUMULATION,
                           metadata=WeeklyStructureMetadata(readiness=analyze_readiness(None),
                                                            fatigue=FatigueAnalysis(),
                                                            training_days_per_week=training_days_per_week, ), )


class PeriodizationService:
    """Service for the weekly training structure."""

    def __init__(self, session: Session, user_id: str = settings.DEFAULT_USER_ID,
                 history: Optional[HistoryService] = None, recovery: Optional[RecoveryService] = None,
                 preferences: Optional[PreferencesService] = None, ):
        self.user_id = user_id
        self.history = history or HistoryService(session, user_id)
        self.recovery = recovery or RecoveryService(session, user_id, self.history)
        self.preferences = preferences or PreferencesService(session, user_id)
        self.repository = WeeklyStructureRepository(session)

    def get_current_week(self, as_of: Optional[datetime.date] = None) -> WeeklyStructure:
        """The structure of ``as_of``'s ISO week, built if none is stored yet."""
        day = as_of or datetime.date.today()
        entry = self.repository.get_by_week(self.user_id, week_start_for(day))
        if entry is not None:
            return WeeklyStructure.model_validate(entry.payload)
        logger.info("No weekly structure for week of %s, generating", week_start_for(day).isoformat())
        return self.regenerate_week(day)

    def regenerate_week(self, as_of: Optional[datetime.date] = None) -> WeeklyStructure:
        day = as_of or datetime.date.today()
        try:
            structure = self._build(day)
        except Exception:
            logger.exception("Weekly structure generation failed, storing neutral structure")
            structure = neutral_weekly_structure(day)

        row = WeeklyStructureRow(user_id=self.user_id, week_start=structure.week_start,
                                 block_type=structure.block_type.value, payload=structure.model_dump(mode="json"), )
        self.repository.replace(row)
        return structure

    def _build(self, day: datetime.date) -> WeeklyStructure:
        training_days = self.preferences.get().training_days_per_week
        history = self.history.get_workouts()
        readiness = analyze_readiness(self.recovery.get_score(day))
        fatigue = analyze_fatigue(history, day)
        monday = week_start_for(day)
        block_type = infer_block_type(readiness, fatigue, monday)
        logger.info("Week of %s: readiness %.0f (%s), ACWR %.2f (%s), block %s", monday.isoformat(),
                    readiness.score, readiness.category.value, fatigue.acwr_value, fatigue.acwr_zone.value,
                    block_type.value)
        return build_weekly_structure(readiness, fatigue, training_days, block_type, monday)
