"""Runtime configuration.

Read from ``CATALOG_*`` environment variables (or a ``.env`` file) and
validated by pydantic-settings, so a bad value fails at startup rather
than on the first request.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        extra="ignore",
    )

    data_file: Path = Path("data") / "products.json"
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE
    default_page_limit: int = Field(default=10, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
