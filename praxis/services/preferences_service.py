"""User preferences service."""

from sqlmodel import Session

from praxis.core.config import settings
from praxis.db.repositories.athlete import PreferencesRepository
from praxis.schemas.preferences import UserPreferences, UserPreferencesUpdate


class PreferencesService:
    def __init__(self, session: Session, user_id: str = settings.DEFAULT_USER_ID):
        self.user_id = user_id
        self.repository = PreferencesRepository(session)

    def get(self) -> UserPreferences:
        """Stored preferences, or the defaults when nothing was saved yet."""
        entry = self.repository.get(self.user_id)
        if entry is None:
            return UserPreferences(training_days_per_week=settings.DEFAULT_TRAINING_DAYS_PER_WEEK)
        return UserPreferences.model_validate(entry.payload)

    def update(self, data: UserPreferencesUpdate) -> UserPreferences:
        current = self.get()
        merged = current.model_copy(update=data.model_dump(exclude_unset=True, exclude_none=True))
        # Re-validate so nested models are real models, not dicts
        preferences = UserPreferences.model_validate(merged.model_dump())
        self.repository.upsert(self.user_id, preferences.model_dump(mode="json"))
        return preferences
