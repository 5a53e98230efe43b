"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_enabled: Turn the slowapi limiter on or off.
        rate_limit_default: Default rate limit for all endpoints.
        database_url: Full SQLAlchemy URL; overrides the postgres_* parts.
        db_pool_size: Connections kept open in the pool.
        db_max_overflow: Extra connections allowed above the pool size.
        db_pool_recycle_seconds: Maximum lifetime of a pooled connection.
        db_connect_attempts: Tries before giving up on the first connection.
        db_connect_retry_seconds: Pause between connection attempts.
        db_auto_create_schema: Create missing tables on startup.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "UserAPI"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "usersdb"

    db_pool_size: int = 10
    db_max_overflow: int = 0
    db_pool_recycle_seconds: int = 60
    db_connect_attempts: int = 10
    db_connect_retry_seconds: float = 2.0
    db_auto_create_schema: bool = True

    def get_database_url(self) -> str:
        """Return the effective database URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build a PostgreSQL URL from the postgres_* values
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
