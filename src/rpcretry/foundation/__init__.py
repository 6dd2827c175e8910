"""Foundation - configuration, errors, logging and test helpers."""

from .config import LoggingSettings, RetrySettings, RpcRetrySettings, clear_settings_cache, get_settings
from .errors import PolicyConfigError, RetryPolicyError
from .logging import configure_logging, get_logger

__all__ = [
    "LoggingSettings", "RetrySettings", "RpcRetrySettings", "clear_settings_cache", "get_settings",
    "PolicyConfigError", "RetryPolicyError",
    "configure_logging", "get_logger",
]
