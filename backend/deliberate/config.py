"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting overridable from environment or .env (prefix-free, case-insensitive)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults run out of the box: sqlite file database, SQL store, JSON logs
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./deliberate.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres URLs come as postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_create_tables: bool = True

    # Session store
    session_store: Literal["sql", "memory"] = "sql"
    cache_max_size: int = 1000
    cache_ttl_seconds: int = 3600

    # Rate limiting
    rate_limit_global_max: int = 100
    rate_limit_global_window_seconds: int = 60
    rate_limit_session_max: int = 30
    rate_limit_session_window_seconds: int = 60
    rate_limit_analysis_max: int = 10
    rate_limit_analysis_window_seconds: int = 300

    # Housekeeping / audit
    housekeeping_interval_seconds: float = 60.0
    audit_max_entries: int = 1000

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
