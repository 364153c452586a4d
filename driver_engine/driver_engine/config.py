"""Driver engine configuration loaded from environment variables."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class PlatformEnv(str, Enum):
    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class Settings(BaseSettings):
    """Application settings loaded from environment variables with DRIVERS_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="DRIVERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    env: PlatformEnv = PlatformEnv.DEV
    debug: bool = False

    # Telemetry
    structured_logging: bool = False

    # Data source
    datasource_url: str | None = None
    datasource_driver_class_name: str | None = None
    datasource_xa_data_source_class_name: str | None = None
    datasource_validation_query: str | None = None

    @field_validator(
        "datasource_url",
        "datasource_driver_class_name",
        "datasource_xa_data_source_class_name",
        "datasource_validation_query",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def is_datasource_configured(self) -> bool:
        return self.datasource_url is not None


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment, with optional overrides for testing."""
    settings = Settings(**overrides)  # type: ignore[arg-type]

    if settings.debug:
        logger.info("Loaded settings for environment: %s", settings.env.value)

    return settings
