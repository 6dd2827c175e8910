"""Permanent-vs-transient failure classifiers.

A classifier is any callable taking a failure status and returning True when
the failure is permanent (retrying cannot help: invalid argument, permission
denied, ...) and False when it is transient (unavailable, timeout, ...).
Policies receive it at construction and treat it as pure.

Status types belong to the RPC layer, so the classifiers here only know how to
pull a code out of a status and look it up in a set supplied by the caller.

Example:
    >>> import grpc  # doctest: +SKIP
    >>> permanent = CodeSetClassifier({
    ...     grpc.StatusCode.INVALID_ARGUMENT,
    ...     grpc.StatusCode.PERMISSION_DENIED,
    ... }, code_of=lambda err: err.code())  # doctest: +SKIP
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Callable, Protocol, TypeVar, runtime_checkable

StatusT_contra = TypeVar("StatusT_contra", contravariant=True)


@runtime_checkable
class PermanentFailureClassifier(Protocol[StatusT_contra]):
    """Protocol for failure classifiers: return True if `status` must not be retried."""
    
    def __call__(self, status: StatusT_contra) -> bool: ...


def never_permanent(status: object) -> bool:
    """Treat every failure as transient."""
    return False


_MISSING = object()


def code_attr(status: object) -> Hashable:
    """Default code extractor: ``status.code`` (called if it is a method, as on
    grpc.RpcError), or the status itself when it has no ``code``."""
    code = getattr(status, "code", _MISSING)
    if code is _MISSING:
        return status
    return code() if callable(code) and not isinstance(code, type) else code


def _key(code: Hashable) -> Hashable:
    # StrEnum members and plain strings compare by their string value
    return str.__str__(code) if isinstance(code, str) else code


def _keys(codes: Iterable[Hashable]) -> frozenset[Hashable]:
    if isinstance(codes, str):
        codes = (codes,)
    return frozenset(_key(c) for c in codes)


@dataclass(frozen=True, slots=True)
class CodeSetClassifier:
    """Mark failures whose code is in `permanent_codes` as permanent.
    
    Attributes:
        permanent_codes: Codes that must never be retried
        code_of: Extracts the code from a status (default: code_attr)
    """
    
    permanent_codes: frozenset[Hashable]
    code_of: Callable[[object], Hashable] = field(default=code_attr, compare=False, repr=False)
    
    def __post_init__(self) -> None:
        object.__setattr__(self, "permanent_codes", _keys(self.permanent_codes))
    
    def __call__(self, status: object) -> bool:
        return _key(self.code_of(status)) in self.permanent_codes


@dataclass(frozen=True, slots=True)
class RetryableCodeSetClassifier:
    """Allow-list variant: any code outside `retryable_codes` is permanent.
    
    Attributes:
        retryable_codes: The only codes worth retrying
        code_of: Extracts the code from a status (default: code_attr)
    """
    
    retryable_codes: frozenset[Hashable]
    code_of: Callable[[object], Hashable] = field(default=code_attr, compare=False, repr=False)
    
    def __post_init__(self) -> None:
        object.__setattr__(self, "retryable_codes", _keys(self.retryable_codes))
    
    def __call__(self, status: object) -> bool:
        return _key(self.code_of(status)) not in self.retryable_codes
