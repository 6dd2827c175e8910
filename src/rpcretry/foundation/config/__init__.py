"""Configuration management using pydantic-settings."""

from .settings import (
    ClockName,
    LoggingSettings,
    RetrySettings,
    RpcRetrySettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "ClockName",
    "LoggingSettings",
    "RetrySettings",
    "RpcRetrySettings",
    "clear_settings_cache",
    "get_settings",
]
