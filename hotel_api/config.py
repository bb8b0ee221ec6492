"""
Hotel API - Application Configuration
======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; validated before app starts.

Database URL resolution:
    DATABASE_URL wins when set (tests point it at SQLite).
    Otherwise the URL is assembled from DB_HOST / DB_PORT / DB_USER /
    DB_PASSWORD / DB_NAME with the asyncpg driver.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults. Production deployments override
    the database credentials at minimum.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Full async URL; takes precedence over the individual DB_* parts
    database_url: Optional[str] = Field(
        default=None,
        description="Async SQLAlchemy URL, e.g. postgresql+asyncpg://user:pw@host:5432/db",
    )

    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432, ge=1, le=65535)
    db_user: str = Field(default="hotels")
    db_password: str = Field(default="password")
    db_name: str = Field(default="hotels")

    # Pool sizing; ignored for SQLite
    db_pool_size: int = Field(default=10, ge=1, le=100)
    db_max_overflow: int = Field(default=5, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # Request bodies larger than this are rejected with 413
    max_body_size: int = Field(default=16_384, ge=1_024, le=10_485_760)

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    # When set, logs are also written here and rotated hourly
    log_file: Optional[str] = Field(default=None)
    log_backup_count: int = Field(default=14 * 24, ge=1)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @property
    def sqlalchemy_database_url(self) -> str:
        """
        What: The URL handed to create_async_engine().
        How:  DATABASE_URL verbatim, or an asyncpg URL built from the DB_* parts.
        """
        if self.database_url:
            return self.database_url
        return URL.create(
            drivername="postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)

    @property
    def is_sqlite(self) -> bool:
        return self.sqlalchemy_database_url.startswith("sqlite")

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATABASE_URL and database_url both work
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
