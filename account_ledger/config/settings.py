"""
Configuration Management for the Account Ledger

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Everything is optional with sensible defaults; the ledger itself holds no
secrets and talks to no external services.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """Ledger behaviour and amount display configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    currency_symbol: str = Field(
        default="$",
        max_length=5,
        description="Symbol shown in front of amounts"
    )
    amount_decimal_places: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Decimal places accepted on input and shown on output"
    )
    max_name_length: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Maximum length of an account holder name"
    )


class LoggingSettings(BaseSettings):
    """Structured logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    level: str = Field(
        default="INFO",
        description="Minimum log level"
    )
    json_output: bool = Field(
        default=False,
        description="Render log lines as JSON instead of console text"
    )

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Only accept standard logging level names."""
        level = v.strip().upper()
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if level not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
        return level


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    page_title: str = Field(
        default="Account Ledger",
        description="Title shown by the front end"
    )


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def ledger(self) -> LedgerSettings:
        return LedgerSettings()

    @property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()
