"""Configuration management for ramo."""

import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FIELD = "Payload__c"


class Settings(BaseSettings):
    """Application settings, read from RAMO_* variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="RAMO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    target: Optional[str] = None
    field_name: Optional[str] = DEFAULT_FIELD

    # Network
    timeout: float = 45.0  # seconds

    # Logging
    log_file: str = "debug.log"
    log_level: str = "DEBUG"

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


def configure_logging(settings: Settings) -> None:
    # The terminal belongs to the UI, so logs go to a file.
    logging.basicConfig(
        filename=settings.log_file,
        level=getattr(logging, settings.log_level, logging.DEBUG),
        filemode="w",
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
