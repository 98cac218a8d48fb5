"""Async Python client for the Monime payments API."""

from .cancellation import CancellationToken
from .client import MonimeClient
from .config import ClientConfig
from .config import RequestOptions
from .errors import ErrorKind
from .errors import MonimeApiError
from .errors import MonimeCancelledError
from .errors import MonimeError
from .errors import MonimeNetworkError
from .errors import MonimeTimeoutError
from .errors import MonimeValidationError
from .errors import ValidationIssue
from .http import RequestDescriptor
from .http import dispatch
from .validation import validate


__all__ = [
    "CancellationToken",
    "ClientConfig",
    "ErrorKind",
    "MonimeApiError",
    "MonimeCancelledError",
    "MonimeClient",
    "MonimeError",
    "MonimeNetworkError",
    "MonimeTimeoutError",
    "MonimeValidationError",
    "RequestDescriptor",
    "RequestOptions",
    "ValidationIssue",
    "dispatch",
    "validate",
]
