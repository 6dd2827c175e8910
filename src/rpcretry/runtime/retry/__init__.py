"""Retry decision policies for RPC clients.

Policies decide whether a failed attempt is worth repeating; the caller owns
the retry loop and any backoff between attempts.

Example:
    >>> from datetime import timedelta
    >>> from rpcretry.runtime.retry import CodeSetClassifier, LimitedDurationRetryPolicy
    >>> 
    >>> is_permanent = CodeSetClassifier({"INVALID_ARGUMENT", "PERMISSION_DENIED"})
    >>> prototype = LimitedDurationRetryPolicy(timedelta(seconds=10), is_permanent)
    >>> 
    >>> policy = prototype.clone()  # one per logical operation
    >>> policy.on_failure("UNAVAILABLE")
    True
    >>> policy.on_failure("INVALID_ARGUMENT")
    False
"""

from .classifier import (
    CodeSetClassifier,
    PermanentFailureClassifier,
    RetryableCodeSetClassifier,
    code_attr,
    never_permanent,
)
from .clock import Clock, monotonic_clock, system_clock
from .defaults import duration_policy_from_settings, error_count_policy_from_settings, resolve_clock
from .policy import (
    ClassifiedRetryPolicy,
    LimitedDurationRetryPolicy,
    LimitedErrorCountRetryPolicy,
    RetryPolicy,
)

__all__ = [
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
    # Settings
    "error_count_policy_from_settings",
    "duration_policy_from_settings",
    "resolve_clock",
]
