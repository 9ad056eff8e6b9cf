"""Recovery score endpoints."""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from praxis.api.dependencies import get_current_user_id
from praxis.db.session import get_db
from praxis.schemas.recovery import RecoveryResponse
from praxis.services.recovery_service import RecoveryService

router = APIRouter()


@router.get("", summary="Get the recovery score of a day.", response_model=RecoveryResponse, )
def get_recovery(as_of: Optional[datetime.date] = Query(None, description="Reference date (defaults to today)"),
                 refresh: bool = Query(False, description="Recompute instead of using the day's cached value"),
                 db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    return RecoveryService(db, user_id).get_recovery(as_of, refresh=refresh)
