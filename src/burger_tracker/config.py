"""Application configuration."""

import logging
import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from burger_tracker.domain.palette import (
    HOME_COLOR,
    UNRESOLVED_PLACE_COLOR,
    hex_to_argb,
    is_valid_argb,
)

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    locale: str = "es"
    seed_initial_data: bool = True
    log_level: str = "INFO"
    home_color: int = HOME_COLOR
    unresolved_place_color: int = UNRESOLVED_PLACE_COLOR
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="BURGER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("home_color", "unresolved_place_color", mode="before")
    @classmethod
    def _parse_color(cls, value: object) -> object:
        """Accept #RRGGBB / #AARRGGBB strings as well as integers."""
        if isinstance(value, str) and value.strip().startswith("#"):
            return hex_to_argb(value)
        return value

    @field_validator("home_color", "unresolved_place_color")
    @classmethod
    def _check_color(cls, value: int) -> int:
        if not is_valid_argb(value):
            raise ValueError("colour must be a 32-bit ARGB value")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        """Normalize the level name and reject unknown ones."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level
