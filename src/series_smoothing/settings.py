from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Output
    output_precision: int = Field(default=6, ge=0, validation_alias="OUTPUT_PRECISION")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
