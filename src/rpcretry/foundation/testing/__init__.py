"""Test helpers: a manual clock and stub failure statuses."""

from .clock import ManualClock
from .status import PERMANENT, PERMANENT_CODES, TRANSIENT, StubStatus, stub_classifier

__all__ = ["ManualClock", "StubStatus", "TRANSIENT", "PERMANENT", "PERMANENT_CODES", "stub_classifier"]
