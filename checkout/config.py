"""Configuration loading for the checkout system.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Catalog configuration
    catalog_backend: Literal["demo", "empty"] = Field(
        default="demo",
        description="Item catalog loaded at startup",
    )
    promotions_enabled: bool = Field(
        default=True,
        description="Register the catalog's promotions on the checkout session",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Run mode
    run_mode: Literal["interactive", "batch"] = Field(
        default="interactive",
        description="Run mode",
    )
    cli_prompt: str = Field(
        default="checkout> ",
        description="Prompt shown in interactive mode",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("cli_prompt")
    @classmethod
    def validate_prompt(cls, v: str) -> str:
        """Ensure the interactive prompt is not blank."""
        if not v.strip():
            raise ValueError("cli_prompt must be a non-empty string")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
