import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

LOG_LEVEL_ENV = "CSS_SELECTOR_BUILDER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class Settings(BaseModel):
    """Runtime settings for the selector builder."""
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = {"frozen": True}

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """
    Input: dotenv_path (optional) - explicit .env file, otherwise the nearest one is used
    Functionality: Load .env values into the environment and read the builder settings
    Output: Settings
    """
    load_dotenv(dotenv_path)
    return Settings(log_level=os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL))
