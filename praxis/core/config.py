"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Praxis adaptive periodization engine."
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Praxis developers"]
    PROJECT_URL: str = "http://localhost:8000/docs"

    # Development server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    DEBUG: bool = False

    # Verbose engine diagnostics (weekly build decisions, lift selection).
    # Diagnostic output only, never changes a computed value.
    PERIODIZATION_DEBUG: bool = False

    # Database
    DATABASE_URL: str = "sqlite:///./praxis.db"

    # Single local athlete
    DEFAULT_USER_ID: str = "local"
    DEFAULT_TRAINING_DAYS_PER_WEEK: int = 4

    # Auto-regulation defaults (percent values)
    AUTOREG_MAX_INCREASE_PERCENT: float = 5.0
    AUTOREG_MAX_DECREASE_PERCENT: float = 10.0
    AUTOREG_HIGH_RECOVERY_BOOST: float = 2.5
    AUTOREG_LOW_RECOVERY_REDUCTION: float = 5.0
    AUTOREG_MIN_WEIGHT: float = 45.0
    AUTOREG_ROUNDING_INCREMENT: float = 2.5

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
