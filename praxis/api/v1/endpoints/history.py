"""Workout history endpoints."""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from praxis.api.dependencies import get_current_user_id
from praxis.db.session import get_db
from praxis.schemas.progress import ExerciseProgress, ProgressSummary, VolumePoint
from praxis.schemas.workout import ExerciseHistoryEntry, WorkoutRecord
from praxis.services.history_service import HistoryService
from praxis.services.recovery_service import RecoveryService

router = APIRouter()


@router.get("", summary="List finished workouts in insertion order.", response_model=list[WorkoutRecord], )
def list_workouts(since: Optional[datetime.date] = Query(None, description="Only workouts on or after this date"),
                  db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    return HistoryService(db, user_id).get_workouts(since)


@router.post("", summary="Append a finished workout.", response_model=WorkoutRecord,
             status_code=status.HTTP_201_CREATED, )
def add_workout(record: WorkoutRecord, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    created = HistoryService(db, user_id).add_workout(record)
    # Cached recovery scores no longer reflect the history
    RecoveryService(db, user_id).clear()
    return created


@router.delete("", summary="Clear the workout history.", status_code=status.HTTP_204_NO_CONTENT, )
def clear_history(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    HistoryService(db, user_id).clear()
    RecoveryService(db, user_id).clear()


@router.get("/exercises/{exercise_id}", summary="Main-lift progression entries of an exercise.",
            response_model=list[ExerciseHistoryEntry], )
def exercise_history(exercise_id: str, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    return HistoryService(db, user_id).get_exercise_history(exercise_id)


@router.get("/exercises", summary="Names of every exercise with progression entries.", response_model=list[str], )
def logged_exercises(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    return HistoryService(db, user_id).list_logged_exercises()


@router.get("/exercises/{exercise_id}/progress", summary="Weight, RPE and volume trends of an exercise.",
            response_model=ExerciseProgress, )
def exercise_progress(exercise_id: str,
                      as_of: Optional[datetime.date] = Query(None, description="Reference date for chart labels"),
                      db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    return HistoryService(db, user_id).get_exercise_progress(exercise_id, as_of)


@router.get("/analytics", summary="Volume trend, averages and per-pattern volume of the history.",
            response_model=ProgressSummary, )
def progress_summary(as_of: Optional[datetime.date] = Query(None, description="Reference date (defaults to today)"),
                     db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    return HistoryService(db, user_id).get_progress_summary(as_of)


@router.get("/analytics/blocks", summary="Volume of one block title over the last workouts.",
            response_model=list[VolumePoint], )
def block_volume(title: str = Query(..., min_length=1), db: Session = Depends(get_db),
                 user_id: str = Depends(get_current_user_id), ):
    return HistoryService(db, user_id).get_block_volume_trend(title)
