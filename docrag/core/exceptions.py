"""
Error taxonomy for the docrag application.

A single exception type carries an ErrorKind tag together with a message
and optional context. Callers dispatch on ``error.kind`` instead of on
subclasses; each kind knows its HTTP status equivalent and whether the
caller may retry.

Dependencies: None (pure domain layer)
System role: Centralized error classification across the application
"""

import asyncio
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Classification of every failure surfaced by the core."""

    VALIDATION = "validation"
    NO_CONTENT = "no_content"
    QUOTA_EXCEEDED = "quota_exceeded"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UPSTREAM_REJECTED = "upstream_rejected"
    PERSISTENCE = "persistence"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        """HTTP status equivalent for this kind."""
        return _STATUS_CODES[self]

    @property
    def retryable(self) -> bool:
        """Whether the caller may safely retry the failed operation."""
        return self is ErrorKind.UPSTREAM_UNAVAILABLE


_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NO_CONTENT: 422,
    ErrorKind.QUOTA_EXCEEDED: 429,
    ErrorKind.UPSTREAM_UNAVAILABLE: 503,
    ErrorKind.UPSTREAM_REJECTED: 502,
    ErrorKind.PERSISTENCE: 500,
    ErrorKind.INTERNAL: 500,
}

QUOTA_EXCEEDED_MESSAGE = (
    "Model provider quota exceeded. Please check your account billing and "
    "quota limits, or wait for the quota to reset."
)


class DocRAGError(Exception):
    """Exception raised for every classified failure in docrag."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize error with its kind, message and optional context.

        Args:
            kind: Error classification tag
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.kind = kind
        self.message = message
        self.details = details or {}
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @property
    def retryable(self) -> bool:
        return self.kind.retryable

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message

    @classmethod
    def validation(cls, message: str, field: str | None = None) -> "DocRAGError":
        details = {"field": field} if field else None
        return cls(ErrorKind.VALIDATION, message, details)

    @classmethod
    def no_content(cls, document_id: str) -> "DocRAGError":
        return cls(
            ErrorKind.NO_CONTENT,
            "Document has no usable text",
            {"document_id": document_id},
        )


_QUOTA_MARKERS = (
    "quota",
    "429",
    "rate limit",
    "ratelimit",
    "rate_limit",
    "resource_exhausted",
    "resourceexhausted",
    "insufficientquotaerror",
    "too many requests",
)
_UNAVAILABLE_MARKERS = (
    "timeout",
    "timed out",
    "connection",
    "unavailable",
    "503",
    "502",
    "504",
    "deadline exceeded",
)


def _status_of(exc: BaseException) -> int | None:
    for attr in ("status_code", "code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int):
            return value
    return None


def classify_upstream_error(exc: BaseException, operation: str) -> DocRAGError:
    """
    Map a model provider exception to a classified DocRAGError.

    Quota and rate-limit conditions are kept distinct from generic
    failures. Timeouts and connection problems are marked retryable.
    Anything else the provider raised is treated as a rejection.

    Args:
        exc: Exception raised by the embedding or completion provider
        operation: Operation name recorded in the error details

    Returns:
        DocRAGError: Classified error (already-classified errors pass through)
    """
    if isinstance(exc, DocRAGError):
        return exc

    details = {"operation": operation, "error_type": type(exc).__name__}
    text = f"{type(exc).__name__} {exc}".lower()
    status = _status_of(exc)

    if status == 429 or any(marker in text for marker in _QUOTA_MARKERS):
        return DocRAGError(ErrorKind.QUOTA_EXCEEDED, QUOTA_EXCEEDED_MESSAGE, details)

    if isinstance(exc, (asyncio.TimeoutError, TimeoutError, ConnectionError)):
        return DocRAGError(
            ErrorKind.UPSTREAM_UNAVAILABLE,
            f"Model provider did not respond during {operation}",
            details,
        )
    if (status is not None and status >= 500) or any(
        marker in text for marker in _UNAVAILABLE_MARKERS
    ):
        return DocRAGError(
            ErrorKind.UPSTREAM_UNAVAILABLE,
            f"Model provider unavailable during {operation}: {exc}",
            details,
        )

    return DocRAGError(
        ErrorKind.UPSTREAM_REJECTED,
        f"Model provider rejected {operation}: {exc}",
        details,
    )
