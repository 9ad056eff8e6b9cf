"""
Workout history service.

The history is append-only.  A finished workout is stored together with the
progression entries of its main lifts in a single commit, so the two can
never disagree.
"""

import datetime
from typing import Optional, Sequence

from fastapi import HTTPException, status
from sqlmodel import Session

from praxis.core.config import settings
from praxis.db.repositories.workout_record import ProgressionRepository, WorkoutRecordRepository
from praxis.models.workout_record import ProgressionEntryRow, WorkoutRecordRow
from praxis.periodization import progress
from praxis.schemas.progress import ExerciseProgress, ProgressSummary, VolumePoint
from praxis.schemas.workout import ExerciseHistoryEntry, WorkoutRecord


class HistoryService:
    """Service for the workout history and main-lift progression entries."""

    def __init__(self, session: Session, user_id: str = settings.DEFAULT_USER_ID):
        self.session = session
        self.user_id = user_id
        self.records = WorkoutRecordRepository(session)
        self.progression = ProgressionRepository(session)

    def get_workouts(self, since: Optional[datetime.date] = None) -> list[WorkoutRecord]:
        if since is not None:
            rows = self.records.list_for_user_since(self.user_id, since)
        else:
            rows = self.records.list_for_user(self.user_id)
        return [self._to_record(row) for row in rows]

    def get_workout(self, record_id: str) -> WorkoutRecord:
        row = self.records.get_by_id(record_id)
        if not row or row.user_id != self.user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found", )
        return self._to_record(row)

    def add_workout(self, record: WorkoutRecord,
                    progression_entries: Sequence[ExerciseHistoryEntry] = (), ) -> WorkoutRecord:
        if self.records.get_by_id(record.id) is not None:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                                detail=f"Workout '{record.id}' already recorded", )

        row = WorkoutRecordRow(id=record.id, user_id=self.user_id, plan_day_id=record.plan_day_id, date=record.date,
                               payload=record.model_dump(mode="json"), )
        self.records.create(row, commit=False)
        self.progression.add_many([self._to_progression_row(e) for e in progression_entries], commit=False)
        self.session.commit()
        return record

    def clear(self) -> None:
        self.progression.clear_for_user(self.user_id)
        self.records.clear_for_user(self.user_id)

    def get_exercise_history(self, exercise_id: str) -> list[ExerciseHistoryEntry]:
        return [self._to_entry(r) for r in self.progression.list_for_exercise(self.user_id, exercise_id)]

    # ------------------------------------------------------------------
    # Progress analytics
    # ------------------------------------------------------------------

    def get_progress_summary(self, as_of: Optional[datetime.date] = None) -> ProgressSummary:
        return progress.summarize_progress(self.get_workouts(), as_of)

    def get_block_volume_trend(self, block_title: str) -> list[VolumePoint]:
        return progress.block_volume_trend(self.get_workouts(), block_title)

    def list_logged_exercises(self) -> list[str]:
        """Display names of every exercise with progression entries, sorted."""
        return progress.unique_exercises([self._to_entry(r) for r in self.progression.list_for_user(self.user_id)])

    def get_exercise_progress(self, exercise_id: str, as_of: Optional[datetime.date] = None) -> ExerciseProgress:
        entries = self.get_exercise_history(exercise_id)
        if not entries:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND,
                                detail=f"No progression entries for '{exercise_id}'", )
        return ExerciseProgress(exercise_id=exercise_id, name=progress.exercise_name(exercise_id),
                                history=progress.newest_first(entries), weight=progress.weight_trend(entries, as_of),
                                rpe=progress.rpe_trend(entries, as_of),
                                volume=progress.volume_trend_for_exercise(entries, as_of), )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_record(row: WorkoutRecordRow) -> WorkoutRecord:
        return WorkoutRecord.model_validate(row.payload)

    @staticmethod
    def _to_entry(row: ProgressionEntryRow) -> ExerciseHistoryEntry:
        return ExerciseHistoryEntry(date=row.date, exercise_id=row.exercise_id, block_id=row.block_id,
                                    session_id=row.session_id, weight=row.weight, reps=row.reps, sets=row.sets,
                                    rpe=row.rpe, volume=row.volume, )

    def _to_progression_row(self, entry: ExerciseHistoryEntry) -> ProgressionEntryRow:
        return ProgressionEntryRow(user_id=self.user_id, exercise_id=entry.exercise_id, session_id=entry.session_id,
                                   block_id=entry.block_id, date=entry.date, weight=entry.weight, reps=entry.reps,
                                   sets=entry.sets, rpe=entry.rpe, volume=entry.volume, )
