"""
Runtime settings for the creational demos.

The original examples picked their product family with preprocessor flags
at build time. Here the same choice is read once from the environment:

    CREATIONAL_PLATFORM   — GUI family (windows, linux, macos). Default: macos
    CREATIONAL_DATABASE   — database family (mysql, postgres, oracle). Default: mysql
    CREATIONAL_ARCHETYPE  — character archetype (hero, rogue, mage). Default: hero
    CREATIONAL_LOG_LEVEL  — logging level. Default: WARNING

Values are kept as plain strings; the factories decide what an unknown
value means (most of them fall back to a default family).
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class CreationalSettings(BaseSettings):
    """Discriminators and logging level for the demos."""

    platform: str = "macos"
    database: str = "mysql"
    archetype: str = "hero"
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="CREATIONAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> CreationalSettings:
    """Return the process-wide settings instance."""
    return CreationalSettings()


def configure_logging(level: str | int | None = None) -> None:
    """
    Configure root logging on stderr.

    Demo output goes to stdout through print(); log records never mix
    with it.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
