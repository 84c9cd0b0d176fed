"""
Settings model for the underbar package.

Values come from ``UNDERBAR_*`` environment variables and are validated by
pydantic. The process-wide instance is built once, on first use.
"""

import os
import logging
from typing import Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict


ENV_PREFIX = "UNDERBAR_"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"


class UnderbarSettings(BaseModel):
    """Runtime settings"""
    log_level: str = Field(
        "WARNING",
        description="Level for the underbar logger"
    )
    log_format: str = Field(
        DEFAULT_LOG_FORMAT,
        description="logging.Formatter format string",
        min_length=1
    )
    shuffle_seed: Optional[int] = Field(
        None,
        description="Seed for the default shuffle RNG; unset means system entropy"
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "log_level": "DEBUG",
                "log_format": "%(levelname)s %(message)s",
                "shuffle_seed": 42
            }
        }
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Normalize and check the level name"""
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level

    @field_validator('shuffle_seed', mode='before')
    @classmethod
    def validate_shuffle_seed(cls, v):
        """Treat blank environment values as unset"""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @classmethod
    def from_env(cls, environ=None) -> "UnderbarSettings":
        """Build settings from ``UNDERBAR_*`` variables, ignoring unset ones."""
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is not None:
                values[name] = raw
        return cls(**values)


_settings: Optional[UnderbarSettings] = None


def get_settings() -> UnderbarSettings:
    """Return the process-wide settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = UnderbarSettings.from_env()
        logging.getLogger(__name__).debug(f"Loaded settings: {_settings.model_dump()}")
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next ``get_settings`` re-reads the environment."""
    global _settings
    _settings = None
