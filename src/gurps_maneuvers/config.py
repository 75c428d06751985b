"""Lightweight configuration for the maneuver tools."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    data_dir: Path = Field(default=Path("encounters"), description="Where encounter snapshots live")
    icon_base_path: str = Field(
        default="systems/gurps/icons/maneuvers/",
        min_length=1,
        description="Directory prefix prepended to every maneuver icon file name",
    )
    default_maneuver: str = Field(
        default="do_nothing",
        description="Maneuver assigned to a token when it joins an encounter",
    )
    game_master: bool = Field(
        default=True,
        description="Whether this process is the authoritative game-master client",
    )
    log_level: str = Field(default="INFO", description="Root logging level for the API process")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:30000", "http://127.0.0.1:30000"],
        description="Origins allowed to call the HTTP API",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    settings = Settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return settings
