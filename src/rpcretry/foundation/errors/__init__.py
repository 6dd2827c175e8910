"""Error types for rpcretry.

- RetryPolicyError: base for everything this package raises
- PolicyConfigError: rejected constructor argument
"""

from .errors import PolicyConfigError, RetryPolicyError, format_validation_error

__all__ = ["PolicyConfigError", "RetryPolicyError", "format_validation_error"]
