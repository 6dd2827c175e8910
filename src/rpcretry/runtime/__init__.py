"""Runtime - retry decision policies."""

from .retry import (
    ClassifiedRetryPolicy,
    CodeSetClassifier,
    LimitedDurationRetryPolicy,
    LimitedErrorCountRetryPolicy,
    PermanentFailureClassifier,
    RetryableCodeSetClassifier,
    RetryPolicy,
    never_permanent,
)

__all__ = [
    "RetryPolicy", "ClassifiedRetryPolicy",
    "LimitedErrorCountRetryPolicy", "LimitedDurationRetryPolicy",
    "PermanentFailureClassifier", "CodeSetClassifier", "RetryableCodeSetClassifier", "never_permanent",
]
