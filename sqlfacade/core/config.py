"""
Settings for sqlfacade, loaded from ``SQLFACADE_*`` environment variables
or a ``.env`` file.
"""

import logging
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sqlfacade.models import ExtractionMode

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SQLFACADE_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "sqlfacade"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    # Name registered for the top-level template; part of the sub-template
    # name set, so it must not collide with real field names.
    ROOT_TEMPLATE_NAME: str = "<root>"
    EXTRACTION_MODE: ExtractionMode = ExtractionMode.GUARD_ONLY

    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level


settings = Settings()  # type: ignore


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the CLI and the HTTP app."""
    logging.basicConfig(level=level or settings.LOG_LEVEL, format=_LOG_FORMAT)
