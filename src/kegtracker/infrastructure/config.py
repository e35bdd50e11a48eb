"""Runtime settings, read from ``KEGTRACKER_*`` environment variables."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="KEGTRACKER_")

    LOG_LEVEL: LogLevel = "WARNING"
    VOLUME_UNIT: str = "gallons"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value
