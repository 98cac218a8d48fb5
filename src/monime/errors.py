"""Exception hierarchy raised by the Monime client."""

from dataclasses import dataclass
from enum import StrEnum
from enum import unique
from typing import Any


RETRYABLE_STATUS_CODES: frozenset[int] = frozenset({429, 500, 502, 503, 504})


@unique
class ErrorKind(StrEnum):
    """Tag identifying which branch of the taxonomy an error belongs to."""

    VALIDATION = "validation"
    API = "api"
    TIMEOUT = "timeout"
    NETWORK = "network"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class ValidationIssue:
    """A single field-level problem found while validating input."""

    field: str
    message: str
    value: Any = None


class MonimeError(Exception):
    """Base class for every error raised by this package."""

    kind: ErrorKind
    retryable: bool = False

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MonimeValidationError(MonimeError):
    """Input did not conform to its schema. Raised before any request."""

    kind = ErrorKind.VALIDATION

    def __init__(
        self, message: str, issues: list[ValidationIssue] | None = None
    ) -> None:
        super().__init__(message)
        self.issues: list[ValidationIssue] = list(issues or [])


class MonimeApiError(MonimeError):
    """The API answered with a failure envelope.

    ``code`` is the HTTP status, ``reason`` the machine readable reason
    from the envelope and ``details`` its field-level detail list.
    ``retry_after`` is the wait advertised by a 429 response, in seconds.
    """

    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        code: int,
        reason: str,
        details: list[Any] | None = None,
        *,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.reason = reason
        self.details: list[Any] = list(details or [])
        self.retry_after = retry_after

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        return self.code in RETRYABLE_STATUS_CODES

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code!r}, "
            f"reason={self.reason!r}, message={self.message!r})"
        )


class MonimeTimeoutError(MonimeError):
    """A single attempt exceeded its deadline. Never retried automatically."""

    kind = ErrorKind.TIMEOUT

    def __init__(self, timeout: float, url: str) -> None:
        super().__init__(f"Request to {url} timed out after {timeout}s")
        self.timeout = timeout
        self.url = url


class MonimeNetworkError(MonimeError):
    """The transport failed before a response was received."""

    kind = ErrorKind.NETWORK
    retryable = True

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class MonimeCancelledError(MonimeError):
    """The caller fired the cancellation token for this request."""

    kind = ErrorKind.CANCELLED

    def __init__(self, message: str = "Request was cancelled") -> None:
        super().__init__(message)
