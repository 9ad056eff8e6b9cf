"""
Shared API dependencies.

Reusable FastAPI dependencies for the local athlete and the live session.
"""

from fastapi import Request

from praxis.core.config import settings
from praxis.services.live_session import LiveSessionManager


def get_current_user_id() -> str:
    """The single local athlete; there are no accounts."""
    return settings.DEFAULT_USER_ID


def get_live_sessions(request: Request) -> LiveSessionManager:
    """The in-memory live session manager held on the application state."""
    return request.app.state.live_sessions
