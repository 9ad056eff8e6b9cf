"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from praxis.api.v1.endpoints import diagnostics, history, periodization, plan, preferences, recovery, sessions

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(recovery.router, prefix="/recovery", tags=["Recovery"])
api_router.include_router(periodization.router, prefix="/periodization", tags=["Periodization"])
api_router.include_router(plan.router, prefix="/plan", tags=["Workout plan"])
api_router.include_router(sessions.router, prefix="/sessions", tags=["Live session"])
api_router.include_router(history.router, prefix="/history", tags=["Workout history"])
api_router.include_router(preferences.router, prefix="/preferences", tags=["Preferences"])
api_router.include_router(diagnostics.router, prefix="/diagnostics", tags=["Diagnostics"])
