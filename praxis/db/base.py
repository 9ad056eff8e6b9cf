"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from praxis.models.athlete import PreferencesRow, RecoverySnapshotRow  # noqa: F401
from praxis.models.plan import PlanDayRow, WeeklyStructureRow  # noqa: F401
from praxis.models.workout_record import ProgressionEntryRow, WorkoutRecordRow  # noqa: F401
