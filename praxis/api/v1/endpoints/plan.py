"""
Workout plan endpoints.

Plan days are keyed by date; generating a week or a day replaces the
existing entries for those dates.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from praxis.api.dependencies import get_current_user_id
from praxis.db.session import get_db
from praxis.schemas.plan import WorkoutPlanDay
from praxis.services.plan_service import PlanService

router = APIRouter()


@router.post("/week", summary="Generate the plan days of the current week.", response_model=list[WorkoutPlanDay],
             status_code=status.HTTP_201_CREATED, )
def generate_week(as_of: Optional[datetime.date] = Query(None, description="Any date of the week"),
                  regenerate_structure: bool = Query(False, description="Rebuild the weekly structure first"),
                  db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    return PlanService(db, user_id).generate_week(as_of, regenerate_structure=regenerate_structure)


@router.get("", summary="List plan days with optional date range.", response_model=list[WorkoutPlanDay], )
def list_plan(start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
              end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
              db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    service = PlanService(db, user_id)
    if start and end:
        return service.get_range(start, end)
    return service.get_all()


@router.get("/{date}", summary="Get the plan day of a date.", response_model=WorkoutPlanDay, )
def get_plan_day(date: datetime.date, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    return PlanService(db, user_id).get_by_date(date)


@router.post("/{date}", summary="Regenerate the plan day of a date.", response_model=WorkoutPlanDay, )
def regenerate_plan_day(date: datetime.date, db: Session = Depends(get_db),
                        user_id: str = Depends(get_current_user_id), ):
    return PlanService(db, user_id).regenerate_day(date)


@router.delete("/id/{plan_day_id}", summary="Delete a plan day.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_plan_day(plan_day_id: str, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    PlanService(db, user_id).remove_plan_day(plan_day_id)
