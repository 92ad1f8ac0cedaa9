"""
Application configuration settings.
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Self


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Issuer ID Service"
    APP_VERSION: str = "0.1.0"
    ENV: str = "development"
    DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    # API
    API_V1_PREFIX: str = "/v1"

    # Issuer ID
    # When False (default) the whole X-Forwarded-For value is treated as a single
    # candidate IP, so a proxy chain like "1.2.3.4, 10.0.0.1" resolves to nothing.
    # Set to True to use the leftmost entry of the chain instead.
    ISSUER_ID_SPLIT_FORWARDED_FOR: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields from .env not defined in Settings
    )

    @model_validator(mode="after")
    def validate_log_level(self) -> Self:
        """Validate LOG_LEVEL against the standard logging level names."""
        valid_levels = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        if self.LOG_LEVEL.upper() not in valid_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of {sorted(valid_levels)}, "
                f"got {self.LOG_LEVEL!r}"
            )
        return self


settings = Settings()
