"""Application configuration via Pydantic Settings.

Settings only tune ambient behaviour (logging); the distance calculation
itself is driven entirely by command-line arguments.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    # Logging
    log_level: str = Field(default="WARNING", validation_alias="HAVERSINE_LOG_LEVEL")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> str:
        """Upper-case the level name; unknown names fall back to WARNING."""
        name = str(value).strip().upper()
        if name not in LOG_LEVELS:
            return "WARNING"
        return name


settings = Settings()
