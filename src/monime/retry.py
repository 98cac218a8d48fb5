"""Retry classification and backoff computation."""

import math
import random as _random
from collections.abc import Callable
from datetime import datetime
from datetime import timezone
from email.utils import parsedate_to_datetime

from .config import ClientConfig
from .errors import MonimeApiError
from .errors import MonimeError
from .errors import MonimeNetworkError


def is_retryable(error: BaseException) -> bool:
    """Whether the dispatch loop should attempt the call again.

    Only network failures and API errors with status 429, 500, 502, 503
    or 504 qualify. Timeouts, cancellations and everything else do not.
    """
    if isinstance(error, MonimeNetworkError):
        return True
    if isinstance(error, MonimeApiError):
        return error.retryable
    return False


def backoff_delay(attempt: int, config: ClientConfig) -> float:
    """Exponential delay for ``attempt`` (0-based) without jitter, capped."""
    delay = config.retry_delay * config.retry_backoff**attempt
    return min(delay, config.max_retry_delay)


def compute_delay(
    attempt: int,
    config: ClientConfig,
    error: MonimeError | None = None,
    *,
    random: Callable[[], float] = _random.random,
) -> float:
    """Seconds to wait before retrying after failed ``attempt``.

    A ``retry_after`` advertised by the failure wins over the exponential
    schedule. Otherwise jitter in ``[0, max_jitter)`` is added to the
    exponential delay. The result never exceeds ``max_retry_delay``.
    """
    retry_after = getattr(error, "retry_after", None)
    if retry_after is not None:
        return min(max(retry_after, 0.0), config.max_retry_delay)
    jitter = random() * config.max_jitter
    return min(backoff_delay(attempt, config) + jitter, config.max_retry_delay)


def parse_retry_after(
    value: str | None, *, now: datetime | None = None
) -> float | None:
    """Parse a ``Retry-After`` header given in seconds or as an HTTP-date.

    :return: Seconds to wait, or ``None`` when the header is absent or
        unparseable. Dates in the past yield ``0.0``.
    """
    if not value:
        return None
    value = value.strip()
    try:
        seconds = float(value)
    except ValueError:
        pass
    else:
        return max(seconds, 0.0) if math.isfinite(seconds) else None
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    current = now or datetime.now(timezone.utc)
    return max((when - current).total_seconds(), 0.0)
