"""Environment-based configuration using pydantic-settings.

Supplies defaults for retry policy prototypes and for the package logger.

Example:
    >>> from rpcretry.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.retry.max_failures
    5
    >>> settings.logging.level
    'WARNING'
    
    # Or with environment variables, or the same lines in a .env file:
    # RPCRETRY_RETRY_MAX_FAILURES=3
    # RPCRETRY_RETRY_MAX_DURATION=12.5
    # RPCRETRY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache
from typing import Literal

from pydantic import Field, NonNegativeFloat, NonNegativeInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ClockName = Literal["monotonic", "system"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class RetrySettings(BaseSettings):
    """Default retry budgets for policy prototypes."""
    
    model_config = SettingsConfigDict(
        env_prefix="RPCRETRY_RETRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    
    max_failures: NonNegativeInt = Field(default=5, description="Transient failures tolerated (0 = never retry)")
    max_duration: NonNegativeFloat = Field(default=30.0, description="Retry window in seconds")
    clock: ClockName = Field(default="monotonic", description="Clock backing duration policies")
    
    @field_validator("clock", mode="before")
    @classmethod
    def _normalize_clock(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v
    
    @property
    def max_duration_td(self) -> timedelta:
        """Retry window as a timedelta."""
        return timedelta(seconds=self.max_duration)


class LoggingSettings(BaseSettings):
    """Logging configuration."""
    
    model_config = SettingsConfigDict(
        env_prefix="RPCRETRY_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    
    level: LogLevel = "WARNING"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    
    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class RpcRetrySettings(BaseSettings):
    """Root settings for rpcretry.
    
    Loads configuration from environment variables with RPCRETRY_ prefix.
    
    Example environment variables:
        RPCRETRY_RETRY_MAX_FAILURES=3
        RPCRETRY_RETRY_CLOCK=system
        RPCRETRY_LOG_LEVEL=DEBUG
    """
    
    model_config = SettingsConfigDict(
        env_prefix="RPCRETRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )
    
    retry: RetrySettings = Field(default_factory=RetrySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> RpcRetrySettings:
    """Get the global settings instance (cached)."""
    return RpcRetrySettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).
    
    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
