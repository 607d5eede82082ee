from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="IGDB Search", alias="APP_NAME")
    app_env: Literal["dev", "staging", "prod"] = Field(default="dev", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    snapshot_dir: str = Field(default="", alias="SNAPSHOT_DIR")

    @property
    def snapshot_path(self) -> Path | None:
        value = self.snapshot_dir.strip()
        return Path(value) if value else None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
