"""
Runtime Configuration.

Settings are read from environment variables (and a local .env file)
once per process.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_DATABASE_URL = "sqlite:///./resume_checks.db"
DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000,"
    "http://localhost:5173,"
    "http://127.0.0.1:3000,"
    "http://127.0.0.1:5173"
)


class Settings(BaseModel):
    """Application settings."""

    database_url: str = DEFAULT_DATABASE_URL
    max_upload_bytes: int = Field(default=5 * 1024 * 1024, gt=0)
    history_limit: int = Field(default=10, ge=1, le=100)
    stored_missing_keywords: int = Field(default=15, ge=0)
    missing_keywords_preview: int = Field(default=15, ge=1)
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=list)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current environment."""
        database_url = os.getenv("RESUME_CHECKER_DATABASE_URL", DEFAULT_DATABASE_URL)

        # * Hosted Postgres URLs often use the legacy scheme SQLAlchemy rejects
        if database_url.startswith("postgres://"):
            database_url = database_url.replace("postgres://", "postgresql://", 1)

        origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)

        return cls(
            database_url=database_url,
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", 5 * 1024 * 1024)),
            history_limit=int(os.getenv("HISTORY_LIMIT", 10)),
            stored_missing_keywords=int(os.getenv("STORED_MISSING_KEYWORDS", 15)),
            missing_keywords_preview=int(os.getenv("MISSING_KEYWORDS_PREVIEW", 15)),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv()
    return Settings.from_env()
