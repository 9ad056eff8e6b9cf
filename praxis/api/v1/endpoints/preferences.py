"""User preference endpoints."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from praxis.api.dependencies import get_current_user_id
from praxis.db.session import get_db
from praxis.schemas.preferences import UserPreferences, UserPreferencesUpdate
from praxis.services.preferences_service import PreferencesService

router = APIRouter()


@router.get("", summary="Get the athlete's preferences.", response_model=UserPreferences, )
def get_preferences(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id), ):
    return PreferencesService(db, user_id).get()


@router.put("", summary="Update the athlete's preferences.", response_model=UserPreferences, )
def update_preferences(data: UserPreferencesUpdate, db: Session = Depends(get_db),
                       user_id: str = Depends(get_current_user_id), ):
    return PreferencesService(db, user_id).update(data)
