"""
Session service.

Connects the in-memory :class:`LiveSessionManager` to the stored plan,
recovery and history: a session starts from the stored plan day of a date,
and finishing it appends the workout and its progression entries to the
history before refreshing that day's recovery score.
"""

import datetime
import logging
from typing import Optional

from sqlmodel import Session

from praxis.core.config import settings
from praxis.schemas.session import LiveSessionState
from praxis.schemas.workout import WorkoutRecord
from praxis.services.history_service import HistoryService
from praxis.services.live_session import LiveSessionManager
from praxis.services.plan_service import PlanService
from praxis.services.recovery_service import RecoveryService

logger = logging.getLogger(__name__)


class SessionService:
    def __init__(self, session: Session, manager: LiveSessionManager, user_id: str = settings.DEFAULT_USER_ID):
        self.manager = manager
        self.history = HistoryService(session, user_id)
        self.recovery = RecoveryService(session, user_id, self.history)
        self.plan = PlanService(session, user_id)

    def start(self, date: Optional[datetime.date] = None) -> LiveSessionState:
        day = date or datetime.date.today()
        plan_day = self.plan.get_by_date(day)
        recovery_score = self.recovery.get_score(day)
        return self.manager.start(plan_day, recovery_score, self.history.get_exercise_history)

    def finish(self) -> WorkoutRecord:
        record, _ = self.manager.finish(on_record=self.history.add_workout)
        self.recovery.refresh(record.date)
        return record
