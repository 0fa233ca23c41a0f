"""Application configuration."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from draughts.pieces import KingRule


class Settings(BaseSettings):
    """Settings loaded from ``CHECKERS_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="CHECKERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False
    log_level: str = "info"
    cors_origins: list[str] = ["*"]

    # Rules
    king_rule: KingRule = KingRule.FLYING


@lru_cache
def get_settings() -> Settings:
    return Settings()
