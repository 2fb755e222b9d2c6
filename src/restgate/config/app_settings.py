"""Application configuration from environment variables.

This module provides the AppSettings class which loads immutable configuration
from environment variables at startup (bind address, log level, error body
format, CORS origins).
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from restgate.constants import (
    BODY_FORMAT_TEXT,
    BODY_FORMATS,
    ENV_DEVELOPMENT,
    ENV_PRODUCTION,
)


class AppSettings(BaseSettings):
    """Static configuration loaded from environment variables.

    All settings can be overridden via environment variables with the
    RESTGATE_ prefix. For example, api_port can be set via RESTGATE_API_PORT.

    Attributes:
        api_host: API server bind address
        api_port: API server port
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        environment: Deployment environment (development, staging, production)
        debug: Enable debug mode
        error_body_format: Body format for error responses (text or json)
        cors_origins: List of allowed CORS origins
    """

    model_config = SettingsConfigDict(
        env_prefix="RESTGATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)

    log_level: str = Field(default="INFO")

    environment: str = Field(default=ENV_DEVELOPMENT)
    debug: bool = Field(default=False)

    error_body_format: str = Field(
        default=BODY_FORMAT_TEXT,
        description="Error response body format: plain text or JSON envelope",
    )

    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"]
    )

    @field_validator("error_body_format")
    @classmethod
    def _check_body_format(cls, value: str) -> str:
        value = value.lower()
        if value not in BODY_FORMATS:
            raise ValueError(
                f"error_body_format must be one of {', '.join(BODY_FORMATS)}"
            )
        return value

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == ENV_PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == ENV_DEVELOPMENT

    def validate_production_config(self) -> list[str]:
        """Validate configuration for production deployment.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.debug:
            errors.append("DEBUG should be False in production")

        if "*" in self.cors_origins:
            errors.append("CORS origins should not allow '*' in production")

        return errors


_app_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """Get singleton instance of static settings.

    Settings are loaded once and cached for application lifetime.

    Returns:
        AppSettings instance
    """
    global _app_settings

    if _app_settings is None:
        _app_settings = AppSettings()

    return _app_settings
