"""Build policy prototypes from RetrySettings.

Example:
    >>> from rpcretry.runtime.retry import CodeSetClassifier, error_count_policy_from_settings
    >>> prototype = error_count_policy_from_settings(CodeSetClassifier({"INVALID_ARGUMENT"}))
    >>> prototype.max_failures
    5
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from rpcretry.foundation.config import get_settings
from rpcretry.foundation.errors import PolicyConfigError

from .classifier import PermanentFailureClassifier
from .clock import Clock, monotonic_clock, system_clock
from .policy import LimitedDurationRetryPolicy, LimitedErrorCountRetryPolicy

if TYPE_CHECKING:
    from rpcretry.foundation.config import RetrySettings

StatusT = TypeVar("StatusT")

_CLOCKS: dict[str, Clock] = {
    "monotonic": monotonic_clock,
    "system": system_clock,
}


def resolve_clock(name: str) -> Clock:
    """Map a clock name ("monotonic" or "system") to a clock callable."""
    try:
        return _CLOCKS[name.lower()]
    except (KeyError, AttributeError):
        raise PolicyConfigError("clock", name, f"expected one of {sorted(_CLOCKS)}") from None


def error_count_policy_from_settings(
    classifier: PermanentFailureClassifier[StatusT],
    settings: RetrySettings | None = None,
) -> LimitedErrorCountRetryPolicy[StatusT]:
    """Error-count prototype using `settings.max_failures` (default: global settings)."""
    cfg = settings or get_settings().retry
    return LimitedErrorCountRetryPolicy(cfg.max_failures, classifier)


def duration_policy_from_settings(
    classifier: PermanentFailureClassifier[StatusT],
    settings: RetrySettings | None = None,
) -> LimitedDurationRetryPolicy[StatusT]:
    """Duration prototype using `settings.max_duration` and `settings.clock`.
    
    The prototype's own deadline starts ticking now; clone it per operation.
    """
    cfg = settings or get_settings().retry
    return LimitedDurationRetryPolicy(cfg.max_duration_td, classifier, resolve_clock(cfg.clock))
