"""
Configuration settings for the Dutch Language Tutor backend.
All environment variables and app settings are centralized here.
"""
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "Dutch Language Tutor"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production

    # API Settings
    API_V1_PREFIX: str = "/api/v1"
    # Proxies set their own CORS headers and bypass the API CORS policy
    PROXY_PREFIX: str = "/api"
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",  # Vite default
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173"
    ]

    # Hugging Face chat completion proxy
    HF_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("HF_API_KEY", "VITE_HF_API_KEY")
    )
    HF_API_BASE: str = "https://router.huggingface.co/v1/chat/completions"
    HF_DEFAULT_MAX_TOKENS: int = 650
    HF_DEFAULT_TOP_P: float = 0.95
    # temperature defaults to a random value in [min, min + spread)
    HF_TEMPERATURE_MIN: float = 0.8
    HF_TEMPERATURE_SPREAD: float = 0.2

    # News feed proxy
    NEWS_ALLOWED_HOSTS: list[str] = [
        "feeds.nos.nl",
        "www.nu.nl",
        "nu.nl",
        "nl.wikinews.org"
    ]
    NEWS_CACHE_MAX_AGE_SECONDS: int = 300
    NEWS_USER_AGENT: str = "DutchLanguageTutor/1.0 (+https://dutch-language-tutor.vercel.app)"
    NEWS_ACCEPT: str = "application/rss+xml, application/xml, text/xml, application/json, text/plain, */*"

    # Outbound HTTP
    UPSTREAM_TIMEOUT_SECONDS: float = 30.0

    # Learner state storage (in-memory when not set)
    DATA_DIR: Optional[str] = None

    # Gamification: a perfect exercise is worth this many points
    MAX_POINTS_PER_EXERCISE: int = 100

    # Performance tracking and learning path progress
    WEAK_POINT_MAX_ERROR_RATE: float = 0.3
    WEAK_POINT_MIN_AVERAGE_SCORE: float = 70.0
    WEAK_POINT_STALE_DAYS: int = 7
    WEAK_POINT_STALE_PRIORITY_BOOST: float = 20.0
    STRUGGLING_ERROR_RATE: float = 0.5
    RECOMMENDATION_LIMIT: int = 5
    STEP_COMPLETION_MIN_AVERAGE: float = 70.0

    # SRS (Spaced Repetition System) Settings
    SRS_INITIAL_INTERVAL_DAYS: int = 1
    SRS_SECOND_INTERVAL_DAYS: int = 6
    SRS_INITIAL_EASE_FACTOR: float = 2.5
    SRS_MIN_EASE_FACTOR: float = 1.3
    SRS_FAILURE_EASE_PENALTY: float = 0.2

    # Logging
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure settings are loaded only once.
    """
    return Settings()


# Singleton instance
settings = get_settings()
