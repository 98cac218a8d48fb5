"""Client-wide configuration and per-request overrides."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING

from .errors import MonimeValidationError
from .errors import ValidationIssue


if TYPE_CHECKING:
    from .cancellation import CancellationToken


DEFAULT_BASE_URL = "https://api.monime.io/v1"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 2
DEFAULT_RETRY_DELAY = 0.5
DEFAULT_RETRY_BACKOFF = 2.0
DEFAULT_MAX_RETRY_DELAY = 30.0
DEFAULT_MAX_JITTER = 0.3
DEFAULT_USER_AGENT = "monime-python/0.1.0"


def _raise_for_issues(issues: list[ValidationIssue], subject: str) -> None:
    if not issues:
        return
    if len(issues) == 1:
        message = issues[0].message
    else:
        message = f"Invalid {subject} ({len(issues)} errors)"
    raise MonimeValidationError(message, issues)


@dataclass(frozen=True, kw_only=True)
class ClientConfig:
    """Settings shared by every request a client makes.

    Instances are immutable; build a new one (for example with
    :func:`dataclasses.replace`) to change settings.

    :param space_id: Monime space the credentials belong to.
    :param access_token: Bearer token for the space.
    :param timeout: Per-attempt timeout in seconds.
    :param max_retries: Retries after the first attempt for transient
        failures.
    :param retry_delay: Base delay in seconds before the first retry.
    :param retry_backoff: Multiplier applied to the delay per attempt.
    :param max_retry_delay: Ceiling for any single wait between attempts.
    :param max_jitter: Upper bound of the random delay added per retry.
    :param validate_inputs: Run client-side input validation before
        sending requests.
    :param api_version: Value for the ``Monime-Version`` header.
    """

    space_id: str
    access_token: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY
    retry_backoff: float = DEFAULT_RETRY_BACKOFF
    max_retry_delay: float = DEFAULT_MAX_RETRY_DELAY
    max_jitter: float = DEFAULT_MAX_JITTER
    validate_inputs: bool = True
    api_version: str | None = None
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        issues = []
        if not self.space_id:
            issues.append(
                ValidationIssue("space_id", "space_id is required", self.space_id)
            )
        if not self.access_token:
            issues.append(
                ValidationIssue("access_token", "access_token is required", "")
            )
        if self.timeout <= 0:
            issues.append(
                ValidationIssue("timeout", "timeout must be positive", self.timeout)
            )
        if self.max_retries < 0:
            issues.append(
                ValidationIssue(
                    "max_retries",
                    "max_retries must not be negative",
                    self.max_retries,
                )
            )
        for name in ("retry_delay", "max_retry_delay", "max_jitter"):
            value = getattr(self, name)
            if value < 0:
                issues.append(
                    ValidationIssue(name, f"{name} must not be negative", value)
                )
        if self.retry_backoff < 1:
            issues.append(
                ValidationIssue(
                    "retry_backoff",
                    "retry_backoff must be at least 1",
                    self.retry_backoff,
                )
            )
        _raise_for_issues(issues, "client configuration")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides
    ) -> "ClientConfig":
        """Build a config from ``MONIME_*`` environment variables.

        Reads ``MONIME_SPACE_ID`` and ``MONIME_ACCESS_TOKEN``, and
        optionally ``MONIME_BASE_URL`` and ``MONIME_API_VERSION``.
        Keyword arguments take precedence over the environment.
        """
        env = os.environ if environ is None else environ
        values: dict = {
            "space_id": env.get("MONIME_SPACE_ID", ""),
            "access_token": env.get("MONIME_ACCESS_TOKEN", ""),
        }
        if env.get("MONIME_BASE_URL"):
            values["base_url"] = env["MONIME_BASE_URL"]
        if env.get("MONIME_API_VERSION"):
            values["api_version"] = env["MONIME_API_VERSION"]
        values.update(overrides)
        return cls(**values)


@dataclass(frozen=True, kw_only=True)
class RequestOptions:
    """Per-request overrides of the client configuration."""

    timeout: float | None = None
    idempotency_key: str | None = None
    max_retries: int | None = None
    cancellation: "CancellationToken | None" = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        issues = []
        if self.timeout is not None and self.timeout <= 0:
            issues.append(
                ValidationIssue("timeout", "timeout must be positive", self.timeout)
            )
        if self.max_retries is not None and self.max_retries < 0:
            issues.append(
                ValidationIssue(
                    "max_retries",
                    "max_retries must not be negative",
                    self.max_retries,
                )
            )
        _raise_for_issues(issues, "request options")
