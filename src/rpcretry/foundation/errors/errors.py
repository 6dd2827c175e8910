"""Errors raised while configuring retry policies.

Deciding whether to retry never raises: `on_failure` and `clone` are total.
The only failures this package reports are construction-time misconfiguration.
"""

from __future__ import annotations

from typing import Self

from pydantic import ValidationError


class RetryPolicyError(Exception):
    """Base class for errors raised by rpcretry."""


class PolicyConfigError(RetryPolicyError, ValueError):
    """Invalid argument given when constructing a retry policy.
    
    Attributes:
        field: Name of the offending constructor argument
        value: The rejected value
    """

    __slots__ = ("field", "value")

    def __init__(self, field: str, value: object, message: str) -> None:
        self.field, self.value = field, value
        super().__init__(f"{field}: {message} (got {value!r})")

    @classmethod
    def from_validation(cls, field: str, value: object, exc: ValidationError) -> Self:
        """Build from a pydantic ValidationError raised while validating `value`."""
        return cls(field, value, format_validation_error(exc))


def format_validation_error(exc: ValidationError) -> str:
    """Collapse a ValidationError into one readable line."""
    errors = exc.errors(include_url=False)
    if not errors:
        return str(exc)
    msgs = [e["msg"] for e in errors]
    return msgs[0] if len(msgs) == 1 else "; ".join(dict.fromkeys(msgs))
