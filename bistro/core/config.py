from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BISTRO_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "bistro"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "console"

    # Storage
    DATA_FILE_PATH: Path = Path("data") / "directory.json"

    # Change notifications kept by the in-process event bus
    EVENT_HISTORY_SIZE: int = 1000

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @field_validator("EVENT_HISTORY_SIZE")
    @classmethod
    def validate_history_size(cls, v: int) -> int:
        if v < 0:
            raise ValueError("EVENT_HISTORY_SIZE must not be negative")
        return v


settings = Settings()
