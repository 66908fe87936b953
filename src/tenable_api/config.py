"""Configuration management for tenable-api using Pydantic Settings.

Configuration is loaded from environment variables and/or .env files.
Environment variables take precedence over .env file values.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://cloud.tenable.com"


class TenableSettings(BaseSettings):
    """Tenable.io API settings."""

    model_config = SettingsConfigDict(env_prefix="TENABLE_")

    access_key: SecretStr = Field(
        default=SecretStr(""),
        description="Tenable user access key",
    )
    secret_key: SecretStr = Field(
        default=SecretStr(""),
        description="Tenable user secret key",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Tenable.io API base URL",
    )
    timeout: int = Field(
        default=30,
        ge=5,
        le=120,
        description="API request timeout in seconds",
    )

    @field_validator("base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Endpoint paths start with a slash, so the base URL must not end with one."""
        return v.rstrip("/") if isinstance(v, str) else v

    @property
    def has_credentials(self) -> bool:
        """Check if both API keys are configured."""
        return bool(self.access_key.get_secret_value() and self.secret_key.get_secret_value())


class Settings(BaseSettings):
    """Main application settings.

    All settings can be configured via environment variables.
    Nested settings use double underscores, e.g., TENABLE__BASE_URL.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    tenable: TenableSettings = Field(default_factory=TenableSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Application settings instance, cached for reuse.
    """
    return Settings()
