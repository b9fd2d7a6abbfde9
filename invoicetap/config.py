"""Configuration loading for invoicetap.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VariantName = Literal[
    "plain",
    "local_variable",
    "dangling_variable",
    "pipe_wrong_return",
    "pipe",
    "tap",
    "tap_function",
    "all",
]


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv. Every variable is prefixed
    with INVOICETAP_, e.g. INVOICETAP_LOG_LEVEL=DEBUG.
    """

    model_config = SettingsConfigDict(
        env_prefix="INVOICETAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Demo scenario
    email: str = Field(
        default="hello@example.com",
        description="Email address of the account to update",
    )
    company_name: str = Field(
        default="Yoyodyne Int'l",
        description="Company name to set on the most recent finalized invoice",
    )
    invoice_number: str = Field(
        default="INV-5309",
        description="Number of the most recent finalized invoice in the demo account",
    )
    variant: VariantName = Field(
        default="tap_function",
        description="Update variant to run, or 'all' for the walkthrough",
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

    @field_validator("email", "company_name", "invoice_number")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure scenario strings are not blank."""
        if not v or not v.strip():
            raise ValueError("must be a non-empty string")
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


__all__ = ["Settings", "VariantName", "load_settings"]
