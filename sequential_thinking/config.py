"""Environment configuration, read once at startup"""

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    disable_thought_logging: bool = False
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value):
        # Unknown levels fall back to INFO rather than stopping startup
        level = str(value).strip().upper()
        return level if level in LOG_LEVELS else "INFO"


def load_settings() -> Settings:
    return Settings(
        disable_thought_logging=os.getenv("DISABLE_THOUGHT_LOGGING", "").strip().lower() == "true",
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
