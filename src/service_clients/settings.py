"""
service_clients.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Point the directory layer at a global configuration snapshot.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SC_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "service-clients"
    log_level: str = "INFO"
    log_json: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # JSON snapshot of member names / global group descriptions. None = empty directory.
    globalconf_path: Path | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Settings are read once per process; tests construct `Settings(...)` directly.
