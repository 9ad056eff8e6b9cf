"""Database repositories."""

from praxis.db.repositories.athlete import PreferencesRepository, RecoverySnapshotRepository
from praxis.db.repositories.plan import PlanDayRepository, WeeklyStructureRepository
from praxis.db.repositories.workout_record import ProgressionRepository, WorkoutRecordRepository

__all__ = [
    "PreferencesRepository",
    "RecoverySnapshotRepository",
    "PlanDayRepository",
    "WeeklyStructureRepository",
    "ProgressionRepository",
    "WorkoutRecordRepository",
]
