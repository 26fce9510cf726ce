"""
shopblog.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the API, persistence and seed entrypoints.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    All values can be overridden with `SHOPBLOG_<NAME>` environment variables.
    """

    model_config = SettingsConfigDict(env_prefix="SHOPBLOG_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "shopblog"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./shopblog.db"
    database_echo: bool = False

    @property
    def auto_create_tables(self) -> bool:
        return self.env in ("dev", "test")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Alembic reads `SHOPBLOG_DATABASE_URL` directly; see `alembic/env.py`.
