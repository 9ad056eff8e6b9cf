"""Application services: state containers over the engine and the database."""

from praxis.services.history_service import HistoryService
from praxis.services.live_session import LiveSessionManager
from praxis.services.performance import PerformanceStore
from praxis.services.periodization_service import PeriodizationService
from praxis.services.plan_service import PlanService
from praxis.services.preferences_service import PreferencesService
from praxis.services.recovery_service import RecoveryService
from praxis.services.session_service import SessionService

__all__ = [
    "HistoryService",
    "LiveSessionManager",
    "PerformanceStore",
    "PeriodizationService",
    "PlanService",
    "PreferencesService",
    "RecoveryService",
    "SessionService",
]
