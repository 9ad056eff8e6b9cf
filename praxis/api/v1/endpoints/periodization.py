"""
Periodization endpoints.

The current week's structure is generated lazily on first access in a new
ISO week; ``/week/regenerate`` replaces it on demand.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from praxis.api.dependencies import get_current_user_id
from praxis.db.session import get_db
from praxis.schemas.periodization import WeeklyStructure
from praxis.services.periodization_service import PeriodizationService

router = APIRouter()


@router.get("/week", summary="Get the weekly structure of the current ISO week.", response_model=WeeklyStructure, )
def get_week(as_of: Optional[datetime.date] = Query(None, description="Any date of the week (defaults to today)"),
             db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    return PeriodizationService(db, user_id).get_current_week(as_of)


@router.post("/week/regenerate", summary="Rebuild the weekly structure from the latest history.",
             response_model=WeeklyStructure, )
def regenerate_week(as_of: Optional[datetime.date] = Query(None), db: Session = Depends(get_db),
                    user_id: str = Depends(get_current_user_id), ):
    return PeriodizationService(db, user_id).regenerate_week(as_of)
