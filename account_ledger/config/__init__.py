"""Configuration package."""

from account_ledger.config.settings import (
    AppSettings,
    LedgerSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "LedgerSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
