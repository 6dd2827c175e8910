"""Tests for LimitedDurationRetryPolicy.

Validates:
- Retries are allowed strictly before the deadline
- Permanent failures stop retrying regardless of time left
- Clones compute a fresh deadline from the clock at clone time
- Constructor argument validation
"""

from __future__ import annotations

import time
from datetime import timedelta

import pytest

from rpcretry.foundation.errors import PolicyConfigError
from rpcretry.foundation.testing import PERMANENT, TRANSIENT, ManualClock, stub_classifier
from rpcretry.runtime.retry import CodeSetClassifier, LimitedDurationRetryPolicy, RetryPolicy, system_clock


# ═════════════════════════════════════════════════════════════════════════════
# Deadline
# ═════════════════════════════════════════════════════════════════════════════


def test_retries_until_deadline(classifier: CodeSetClassifier, clock: ManualClock) -> None:
    policy = LimitedDurationRetryPolicy(timedelta(milliseconds=100), classifier, clock)
    assert policy.on_failure(TRANSIENT) is True
    
    clock.set(1000.099)
    assert policy.on_failure(TRANSIENT) is True
    
    clock.set(policy.deadline)
    assert policy.on_failure(TRANSIENT) is False
    
    clock.set(1005.0)
    assert policy.on_failure(TRANSIENT) is False


def test_deadline_fixed_at_construction(classifier: CodeSetClassifier, clock: ManualClock) -> None:
    policy = LimitedDurationRetryPolicy(timedelta(seconds=2), classifier, clock)
    assert policy.deadline == pytest.approx(1002.0)
    clock.advance(1.5)
    policy.on_failure(TRANSIENT)
    assert policy.deadline == pytest.approx(1002.0)
    assert policy.remaining == pytest.approx(0.5)


def test_remaining_never_negative(classifier: CodeSetClassifier, clock: ManualClock) -> None:
    policy = LimitedDurationRetryPolicy(1, classifier, clock)
    clock.advance(timedelta(minutes=1))
    assert policy.remaining == 0.0


def test_accepts_seconds(classifier: CodeSetClassifier, clock: ManualClock) -> None:
    policy = LimitedDurationRetryPolicy(1.5, classifier, clock)
    assert policy.max_duration == timedelta(seconds=1.5)
    assert policy.deadline == pytest.approx(1001.5)


def test_zero_duration_never_retries(classifier: CodeSetClassifier, clock: ManualClock) -> None:
    policy = LimitedDurationRetryPolicy(timedelta(0), classifier, clock)
    assert policy.on_failure(TRANSIENT) is False


def test_default_clock_is_monotonic(classifier: CodeSetClassifier) -> None:
    policy = LimitedDurationRetryPolicy(timedelta(hours=1), classifier)
    assert policy.clock is time.monotonic
    assert policy.on_failure(TRANSIENT) is True


def test_wall_clock_can_be_injected(classifier: CodeSetClassifier) -> None:
    policy = LimitedDurationRetryPolicy(timedelta(hours=1), classifier, system_clock)
    assert policy.clock is time.time
    assert policy.on_failure(TRANSIENT) is True


# ═════════════════════════════════════════════════════════════════════════════
# Permanent Failures
# ═════════════════════════════════════════════════════════════════════════════


def test_permanent_failure_stops_before_deadline(classifier: CodeSetClassifier, clock: ManualClock) -> None:
    policy = LimitedDurationRetryPolicy(timedelta(hours=1), classifier, clock)
    assert policy.on_failure(PERMANENT) is False
    assert policy.on_failure(TRANSIENT) is True


# ═════════════════════════════════════════════════════════════════════════════
# Cloning
# ═════════════════════════════════════════════════════════════════════════════


def test_clone_gets_fresh_deadline(classifier: CodeSetClassifier, clock: ManualClock) -> None:
    """Cloning recomputes the deadline from now instead of copying it."""
    prototype = LimitedDurationRetryPolicy(timedelta(milliseconds=100), classifier, clock)
    clock.advance(10.0)
    assert prototype.on_failure(TRANSIENT) is False
    
    clone = prototype.clone()
    assert isinstance(clone, RetryPolicy)
    assert isinstance(clone, LimitedDurationRetryPolicy)
    assert clone.deadline == pytest.approx(1010.1)
    assert clone.deadline != prototype.deadline
    assert clone.max_duration == prototype.max_duration
    assert clone.on_failure(TRANSIENT) is True
    
    clock.advance(0.1)
    assert clone.on_failure(TRANSIENT) is False


def test_clone_matches_fresh_policy(classifier: CodeSetClassifier, clock: ManualClock) -> None:
    prototype = LimitedDurationRetryPolicy(timedelta(seconds=1), classifier, clock)
    clock.advance(5.0)
    fresh = LimitedDurationRetryPolicy(timedelta(seconds=1), classifier, clock)
    clone = prototype.clone()
    assert clone.deadline == fresh.deadline
    assert clone.on_failure(TRANSIENT) == fresh.on_failure(TRANSIENT) is True


def test_clone_keeps_clock_and_classifier(classifier: CodeSetClassifier, clock: ManualClock) -> None:
    clone = LimitedDurationRetryPolicy(1, classifier, clock).clone()
    assert clone.clock is clock
    assert clone.classifier is classifier


# ═════════════════════════════════════════════════════════════════════════════
# Validation
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("bad", [-1, timedelta(seconds=-0.5), "soon", None])
def test_rejects_invalid_duration(classifier: CodeSetClassifier, clock: ManualClock, bad: object) -> None:
    with pytest.raises(PolicyConfigError) as exc_info:
        LimitedDurationRetryPolicy(bad, classifier, clock)  # type: ignore[arg-type]
    assert exc_info.value.field == "max_duration"


def test_rejects_non_callable_clock(classifier: CodeSetClassifier) -> None:
    with pytest.raises(PolicyConfigError) as exc_info:
        LimitedDurationRetryPolicy(1, classifier, 12.0)  # type: ignore[arg-type]
    assert exc_info.value.field == "clock"


def test_repr(classifier: CodeSetClassifier) -> None:
    policy = LimitedDurationRetryPolicy(2, classifier, ManualClock())
    assert repr(policy) == "LimitedDurationRetryPolicy(max_duration=datetime.timedelta(seconds=2), deadline=2.000)"


def test_manual_clock_drives_deadline() -> None:
    """Mirrors the ManualClock usage example."""
    clock = ManualClock()
    policy = LimitedDurationRetryPolicy(0.1, stub_classifier, clock)
    assert policy.on_failure(TRANSIENT) is True
    assert clock.advance(0.1) == 0.1
    assert policy.on_failure(TRANSIENT) is False
