"""
Recovery service.

The recovery score is computed from the workout history once per calendar
day and cached.  Finishing a workout refreshes the cached value of that day.
"""

import datetime
import logging
from typing import Optional

from sqlmodel import Session

from praxis.core.config import settings
from praxis.db.repositories.athlete import RecoverySnapshotRepository
from praxis.periodization.load import calculate_recovery_score
from praxis.periodization.readiness import analyze_readiness
from praxis.schemas.recovery import RecoveryBreakdown, RecoveryResponse
from praxis.services.history_service import HistoryService

logger = logging.getLogger(__name__)


class RecoveryService:
    def __init__(self, session: Session, user_id: str = settings.DEFAULT_USER_ID,
                 history: Optional[HistoryService] = None, ):
        self.user_id = user_id
        self.history = history or HistoryService(session, user_id)
        self.repository = RecoverySnapshotRepository(session)

    def get_recovery(self, as_of: Optional[datetime.date] = None, refresh: bool = False) -> RecoveryResponse:
        day = as_of or datetime.date.today()
        cached = None if refresh else self.repository.get_by_date(self.user_id, day)
        if cached is not None:
            breakdown = RecoveryBreakdown.model_validate(cached.breakdown)
            return RecoveryResponse(date=day, score=cached.score, breakdown=breakdown,
                                    readiness=analyze_readiness(cached.score), )

        result = calculate_recovery_score(self.history.get_workouts(), day)
        self.repository.upsert(self.user_id, day, result.score, result.breakdown.model_dump(mode="json"))
        logger.info("Recovery for %s: %d", day.isoformat(), result.score)
        return RecoveryResponse(date=day, score=result.score, breakdown=result.breakdown,
                                readiness=analyze_readiness(result.score), )

    def get_score(self, as_of: Optional[datetime.date] = None) -> int:
        return self.get_recovery(as_of).score

    def refresh(self, as_of: Optional[datetime.date] = None) -> RecoveryResponse:
        return self.get_recovery(as_of, refresh=True)

    def clear(self) -> None:
        self.repository.delete_for_user(self.user_id)
