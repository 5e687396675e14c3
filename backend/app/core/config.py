"""
Application configuration.
All values loaded from environment variables.
"""
from typing import List, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Database
    DATABASE_URL: str = "postgresql+asyncpg://postgres:postgres@db:5432/workouts"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:8081", "http://127.0.0.1:8081"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json or console

    # Workouts REST API consumed by the client
    WORKOUTS_API_URL: str = "http://localhost:3000"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    # IANA zone used for calendar-day bucketing of aware timestamps.
    # None means the server's local zone.
    TIMEZONE: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
