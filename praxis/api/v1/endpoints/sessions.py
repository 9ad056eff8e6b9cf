"""
Live session endpoints.

The session lives in memory on the application; only ``/finish`` writes
to the database.  Sets are addressed by block id and zero-based index.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from praxis.api.dependencies import get_current_user_id, get_live_sessions
from praxis.db.session import get_db
from praxis.schemas.autoregulation import SetSuggestion
from praxis.schemas.session import (CompleteSetResponse, LiveSessionState, SetRpeRequest, SetWeightRequest,
                                    StartSessionRequest, )
from praxis.schemas.workout import WorkoutRecord
from praxis.services.live_session import LiveSessionManager
from praxis.services.session_service import SessionService

router = APIRouter()

SET_PATH = "/blocks/{block_id}/sets/{set_index}"


@router.post("/start", summary="Start a session from the plan day of a date.", response_model=LiveSessionState,
             status_code=status.HTTP_201_CREATED, )
def start_session(data: StartSessionRequest, db: Session = Depends(get_db),
                  manager: LiveSessionManager = Depends(get_live_sessions),
                  user_id: str = Depends(get_current_user_id), ):
    return SessionService(db, manager, user_id).start(data.date)


@router.get("/current", summary="Get the session in progress, if any.", response_model=Optional[LiveSessionState], )
def current_session(manager: LiveSessionManager = Depends(get_live_sessions)):
    return manager.state


@router.put(SET_PATH + "/weight", summary="Set the weight of a set (0 or null clears it).",
            response_model=LiveSessionState, )
def set_weight(block_id: str, set_index: int, data: SetWeightRequest,
               manager: LiveSessionManager = Depends(get_live_sessions), ):
    return manager.set_weight(block_id, set_index, data.weight)


@router.put(SET_PATH + "/rpe", summary="Set the RPE of a set.", response_model=LiveSessionState, )
def set_rpe(block_id: str, set_index: int, data: SetRpeRequest,
            manager: LiveSessionManager = Depends(get_live_sessions), ):
    return manager.set_rpe(block_id, set_index, data.rpe)


@router.post(SET_PATH + "/complete", summary="Toggle completion of a set.", response_model=CompleteSetResponse, )
def complete_set(block_id: str, set_index: int, manager: LiveSessionManager = Depends(get_live_sessions)):
    return manager.complete_set(block_id, set_index)


@router.post(SET_PATH + "/undo", summary="Mark a set as not completed.", response_model=LiveSessionState, )
def undo_set(block_id: str, set_index: int, manager: LiveSessionManager = Depends(get_live_sessions)):
    return manager.undo_set(block_id, set_index)


@router.post(SET_PATH + "/rest/start", summary="Start the rest timer after a set.", response_model=LiveSessionState, )
def start_rest(block_id: str, set_index: int, manager: LiveSessionManager = Depends(get_live_sessions)):
    return manager.start_rest_timer(block_id, set_index)


@router.post(SET_PATH + "/rest/stop", summary="Stop the rest timer and record the rest time.",
             response_model=LiveSessionState, )
def stop_rest(block_id: str, set_index: int, manager: LiveSessionManager = Depends(get_live_sessions)):
    return manager.stop_rest_timer(block_id, set_index)


@router.post("/blocks/{block_id}/complete", summary="Mark a block as completed.", response_model=LiveSessionState, )
def complete_block(block_id: str, manager: LiveSessionManager = Depends(get_live_sessions)):
    return manager.complete_block(block_id)


@router.post("/next-block", summary="Move to the next block.", response_model=LiveSessionState, )
def next_block(manager: LiveSessionManager = Depends(get_live_sessions)):
    return manager.next_block()


@router.get("/suggestions", summary="Load suggestions for upcoming sets.", response_model=list[SetSuggestion], )
def list_suggestions(manager: LiveSessionManager = Depends(get_live_sessions)):
    return manager.suggestions()


@router.post("/finish", summary="Finish the session and record the workout.", response_model=WorkoutRecord,
             status_code=status.HTTP_201_CREATED, )
def finish_session(db: Session = Depends(get_db), manager: LiveSessionManager = Depends(get_live_sessions),
                   user_id: str = Depends(get_current_user_id), ):
    return SessionService(db, manager, user_id).finish()


@router.post("/cancel", summary="Discard the session without recording it.",
             status_code=status.HTTP_204_NO_CONTENT, )
def cancel_session(manager: LiveSessionManager = Depends(get_live_sessions)):
    manager.cancel()
