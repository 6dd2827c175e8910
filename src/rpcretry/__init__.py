"""rpcretry - Pluggable retry decision policies for RPC clients.

A client is configured with a policy prototype. For every logical operation it
clones the prototype and, each time an attempt fails, asks the clone whether
to try again. Failures the classifier marks permanent are never retried.

Quick Start:
    >>> from rpcretry import CodeSetClassifier, LimitedErrorCountRetryPolicy
    >>> 
    >>> is_permanent = CodeSetClassifier({"INVALID_ARGUMENT", "PERMISSION_DENIED"})
    >>> prototype = LimitedErrorCountRetryPolicy(2, is_permanent)
    >>> 
    >>> policy = prototype.clone()
    >>> [policy.on_failure("UNAVAILABLE") for _ in range(3)]
    [True, True, False]

Duration-bounded retries:
    >>> from datetime import timedelta
    >>> from rpcretry import LimitedDurationRetryPolicy
    >>> prototype = LimitedDurationRetryPolicy(timedelta(seconds=30), is_permanent)

Configuration from the environment (RPCRETRY_RETRY_MAX_FAILURES, ...):
    >>> from rpcretry import error_count_policy_from_settings
    >>> prototype = error_count_policy_from_settings(is_permanent)
"""

from __future__ import annotations

__version__ = "0.1.0"

from .foundation.config import RpcRetrySettings, clear_settings_cache, get_settings
from .foundation.errors import PolicyConfigError, RetryPolicyError
from .foundation.logging import configure_logging
from .runtime.retry import (
    ClassifiedRetryPolicy,
    Clock,
    CodeSetClassifier,
    LimitedDurationRetryPolicy,
    LimitedErrorCountRetryPolicy,
    PermanentFailureClassifier,
    RetryableCodeSetClassifier,
    RetryPolicy,
    code_attr,
    duration_policy_from_settings,
    error_count_policy_from_settings,
    monotonic_clock,
    never_permanent,
    resolve_clock,
    system_clock,
)

__all__ = [
    "__version__",
    # Policies
    "RetryPolicy",
    "ClassifiedRetryPolicy",
    "LimitedErrorCountRetryPolicy",
    "LimitedDurationRetryPolicy",
    # Classifiers
    "PermanentFailureClassifier",
    "CodeSetClassifier",
    "RetryableCodeSetClassifier",
    "code_attr",
    "never_permanent",
    # Clocks
    "Clock",
    "monotonic_clock",
    "system_clock",
    "resolve_clock",
    # Configuration
    "RpcRetrySettings",
    "get_settings",
    "clear_settings_cache",
    "error_count_policy_from_settings",
    "duration_policy_from_settings",
    "configure_logging",
    # Errors
    "RetryPolicyError",
    "PolicyConfigError",
]
