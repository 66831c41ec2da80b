"""Application configuration module."""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Storage settings
    STORAGE_BACKEND: str = "memory"  # "memory" or "sql"
    DATABASE_URL: str = "sqlite+aiosqlite:///./lms_assessments.db"
    SQL_ECHO: bool = False
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
    LOG_FILE: Optional[str] = None

    # API settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "LMS Assessments"
    CORS_ORIGINS: List[str] = ["*"]

    # Assessment engine settings
    DEFAULT_QUESTION_COUNT: int = 10
    MAX_QUESTION_COUNT: int = 100
    COMPLETENESS_POLICY: str = "all_topics_have_exercises"
    ANSWER_CASE_SENSITIVE: bool = True
    SAMPLER_SEED: Optional[int] = None


# Create global settings instance
settings = Settings()
