# lifesim/config.py
"""
Configuration for the life-simulation backend.

Values are loaded from environment variables (via .env file) and validated
with Pydantic. The emotion tables are fixed and live in lifesim.emotion;
only the ambient knobs around them are configured here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import structlog
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

logger = structlog.get_logger(__name__)

# Resolve .env relative to the project root (one level above lifesim/).
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseSettings):
    """Configuration for structured logging."""

    level: str = Field("WARNING", alias="LIFESIM_LOG_LEVEL")
    colors: bool = Field(True, alias="LIFESIM_LOG_COLORS")

    model_config = {"env_file": _ENV_FILE, "extra": "ignore", "populate_by_name": True}

    @model_validator(mode="after")
    def normalize_level(self) -> "LoggingConfig":
        level = str(self.level).strip().upper()
        if level not in _LOG_LEVELS:
            logger.warning("config.unknown_log_level", level=self.level, fallback="WARNING")
            level = "WARNING"
        self.level = level
        return self


class EmotionSandboxConfig(BaseSettings):
    """Configuration for the emotion sandbox harness."""

    max_pulls: int = Field(2, alias="LIFESIM_SANDBOX_MAX_PULLS")
    # Unset => fresh randomness on every activity roll
    random_seed: Optional[int] = Field(None, alias="LIFESIM_RANDOM_SEED")

    model_config = {"env_file": _ENV_FILE, "extra": "ignore", "populate_by_name": True}

    @model_validator(mode="after")
    def normalize_limits(self) -> "EmotionSandboxConfig":
        self.max_pulls = max(1, int(self.max_pulls))
        return self


class LifesimConfig:
    """Master configuration composing all subsystem configs."""

    def __init__(self):
        self.logging = LoggingConfig()
        self.sandbox = EmotionSandboxConfig()

    def __repr__(self) -> str:
        return (
            f"LifesimConfig(log_level={self.logging.level}, "
            f"sandbox_max_pulls={self.sandbox.max_pulls})"
        )
