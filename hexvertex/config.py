from __future__ import annotations

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Raise UnresolvableOrientationError instead of returning the sentinel
    debug: bool = False
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="HEXVERTEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install a default root handler. Applications call this; the library never does."""
    logging.basicConfig(level=(level or settings.log_level).upper())
