"""SQLModel database models."""

from praxis.models.athlete import PreferencesRow, RecoverySnapshotRow
from praxis.models.plan import PlanDayRow, WeeklyStructureRow
from praxis.models.workout_record import ProgressionEntryRow, WorkoutRecordRow

__all__ = [
    "PreferencesRow",
    "RecoverySnapshotRow",
    "PlanDayRow",
    "WeeklyStructureRow",
    "ProgressionEntryRow",
    "WorkoutRecordRow",
]
