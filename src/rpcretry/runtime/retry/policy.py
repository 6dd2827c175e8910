"""Retry policies for RPC clients.

A policy answers one question after each failed attempt: try again or give up?
It does not sleep, back off, or re-issue the call; the caller's retry loop
does that and consults the policy through on_failure().

Clients keep a configured prototype and clone() it for every logical
operation, so each operation starts with its full budget:

Example:
    >>> prototype = LimitedErrorCountRetryPolicy(3, classifier=is_permanent)
    >>> policy = prototype.clone()
    >>> while True:
    ...     status = attempt_rpc()
    ...     if status.ok or not policy.on_failure(status):
    ...         break

Instances are not thread-safe; clones share no mutable state and can be used
from different threads.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Annotated, Generic, TypeVar

from pydantic import Field, TypeAdapter, ValidationError

from rpcretry.foundation.errors import PolicyConfigError

from .classifier import PermanentFailureClassifier
from .clock import Clock, monotonic_clock

logger = logging.getLogger("rpcretry.retry")

StatusT = TypeVar("StatusT")

# Strict so that True/False and "3" are rejected rather than coerced
_MAX_FAILURES: TypeAdapter[int] = TypeAdapter(Annotated[int, Field(ge=0, strict=True)])
_MAX_DURATION: TypeAdapter[timedelta] = TypeAdapter(Annotated[timedelta, Field(ge=timedelta(0))])


def _validate(adapter: TypeAdapter, field: str, value: object):
    try:
        return adapter.validate_python(value)
    except ValidationError as e:
        raise PolicyConfigError.from_validation(field, value, e) from e


def _require_callable(field: str, value: object) -> None:
    if not callable(value):
        raise PolicyConfigError(field, value, "must be callable")


class RetryPolicy(ABC, Generic[StatusT]):
    """Contract for deciding whether a failed RPC should be retried.

    Implementations keep their own progress (failures seen, time left) and
    update it only from on_failure(). Everything else is fixed at construction.
    """

    __slots__ = ()

    @abstractmethod
    def clone(self) -> RetryPolicy[StatusT]:
        """Return a new policy with the same limits and fresh progress."""

    @abstractmethod
    def on_failure(self, status: StatusT) -> bool:
        """Record a failed attempt. Returns True if the operation should be retried."""


class ClassifiedRetryPolicy(RetryPolicy[StatusT]):
    """Base for policies that never retry permanent failures.

    Subclasses implement _allow_retry(), which is only reached for transient
    failures, so permanent failures never consume budget.
    """

    __slots__ = ("_classifier",)

    def __init__(self, classifier: PermanentFailureClassifier[StatusT]) -> None:
        _require_callable("classifier", classifier)
        self._classifier = classifier

    @property
    def classifier(self) -> PermanentFailureClassifier[StatusT]:
        return self._classifier

    def on_failure(self, status: StatusT) -> bool:
        if self._classifier(status):
            logger.debug("permanent failure, not retrying: %r", status)
            return False
        return self._allow_retry()

    @abstractmethod
    def _allow_retry(self) -> bool:
        """Consume budget for one transient failure; True if any was left."""


class LimitedErrorCountRetryPolicy(ClassifiedRetryPolicy[StatusT]):
    """Retry until `max_failures` transient failures have been seen.

    Exactly `max_failures` transient failures are tolerated; the next one stops
    retrying. ``max_failures=0`` never retries.

    Args:
        max_failures: Transient failures tolerated (int, >= 0)
        classifier: Returns True for permanent failures

    Raises:
        PolicyConfigError: `max_failures` is negative or not an int, or
            `classifier` is not callable
    """

    __slots__ = ("_max_failures", "_failure_count")

    def __init__(self, max_failures: int, classifier: PermanentFailureClassifier[StatusT]) -> None:
        super().__init__(classifier)
        self._max_failures: int = _validate(_MAX_FAILURES, "max_failures", max_failures)
        self._failure_count = 0

    @property
    def max_failures(self) -> int:
        return self._max_failures

    @property
    def failure_count(self) -> int:
        """Transient failures recorded so far."""
        return self._failure_count

    def clone(self) -> RetryPolicy[StatusT]:
        return LimitedErrorCountRetryPolicy(self._max_failures, self._classifier)

    def _allow_retry(self) -> bool:
        # Compare before incrementing: the Nth failure is checked against count N-1
        seen = self._failure_count
        self._failure_count = seen + 1
        if seen < self._max_failures:
            return True
        logger.debug("error budget exhausted after %d transient failures", self._failure_count)
        return False

    def __repr__(self) -> str:
        return f"LimitedErrorCountRetryPolicy(max_failures={self._max_failures}, failure_count={self._failure_count})"


class LimitedDurationRetryPolicy(ClassifiedRetryPolicy[StatusT]):
    """Retry transient failures until `max_duration` has elapsed.

    The deadline is fixed when the policy is built. Cloning builds a new policy
    from `max_duration`, so every clone gets a full window starting at clone time.

    Args:
        max_duration: Retry window, timedelta or seconds (>= 0)
        classifier: Returns True for permanent failures
        clock: Zero-arg callable returning seconds (default: time.monotonic).
            With a wall clock, system time changes shift the deadline.

    Raises:
        PolicyConfigError: `max_duration` is negative or not a duration, or
            `classifier`/`clock` is not callable
    """

    __slots__ = ("_max_duration", "_clock", "_deadline")

    def __init__(
        self,
        max_duration: timedelta | float,
        classifier: PermanentFailureClassifier[StatusT],
        clock: Clock = monotonic_clock,
    ) -> None:
        super().__init__(classifier)
        _require_callable("clock", clock)
        self._max_duration: timedelta = _validate(_MAX_DURATION, "max_duration", max_duration)
        self._clock = clock
        self._deadline: float = clock() + self._max_duration.total_seconds()

    @property
    def max_duration(self) -> timedelta:
        return self._max_duration

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def deadline(self) -> float:
        """Clock reading at which retrying stops."""
        return self._deadline

    @property
    def remaining(self) -> float:
        """Seconds left before the deadline (0.0 once passed)."""
        return max(0.0, self._deadline - self._clock())

    def clone(self) -> RetryPolicy[StatusT]:
        return LimitedDurationRetryPolicy(self._max_duration, self._classifier, self._clock)

    def _allow_retry(self) -> bool:
        if self._clock() < self._deadline:
            return True
        logger.debug("retry window of %s exhausted", self._max_duration)
        return False

    def __repr__(self) -> str:
        return f"LimitedDurationRetryPolicy(max_duration={self._max_duration!r}, deadline={self._deadline:.3f})"
