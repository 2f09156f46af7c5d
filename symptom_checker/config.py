"""
Configuration management for the AI Symptom Checker.
Uses pydantic-settings for type-safe environment variable handling.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "AI Symptom Checker"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Browser front end allowed through CORS
    FRONTEND_ORIGIN: str = "http://localhost:3000"

    # AI provider (Google Gemini)
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.5-flash"

    # Rate limiting, per client address
    ANALYSIS_RATE_LIMIT: str = "10/minute"
    SESSION_CREATE_RATE_LIMIT: str = "30/minute"

    # In-memory flow sessions
    MAX_SESSIONS: int = 1000

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
