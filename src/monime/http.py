"""Request dispatch core shared by every resource module.

All outbound calls go through :func:`dispatch`, which builds the request,
applies authentication and idempotency headers, enforces the per-attempt
timeout, observes the caller's cancellation token and retries transient
failures with exponential backoff.
"""

import asyncio
import json
import logging
import random as _random
import time
import uuid
from collections.abc import Awaitable
from collections.abc import Callable
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from typing import Any

import httpx

from .cancellation import run_cancellable
from .config import ClientConfig
from .config import RequestOptions
from .errors import MonimeApiError
from .errors import MonimeError
from .errors import MonimeNetworkError
from .errors import MonimeTimeoutError
from .retry import compute_delay
from .retry import is_retryable
from .retry import parse_retry_after


logger = logging.getLogger(__name__)

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})
MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})
PROTECTED_HEADERS = frozenset(
    {"authorization", "monime-space-id", "idempotency-key"}
)

Sleep = Callable[[float], Awaitable[Any]]


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything needed to perform one logical API call."""

    method: str
    path: str
    query: Mapping[str, Any] | None = None
    body: Any = None
    options: RequestOptions = field(default_factory=RequestOptions)

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method!r}")
        if not self.path or not self.path.startswith("/"):
            raise ValueError(
                f"Request path must be a non-empty absolute path, "
                f"got {self.path!r}"
            )
        object.__setattr__(self, "method", method)

    @property
    def is_mutating(self) -> bool:
        return self.method in MUTATING_METHODS


@dataclass
class RetryState:
    """Progress of one dispatch call through its retry budget."""

    attempt: int = 0
    started_at: float = field(default_factory=time.monotonic)
    last_error: MonimeError | None = None

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self.started_at


def encode_query(query: Mapping[str, Any] | None) -> dict[str, str]:
    """Stringify query parameters, dropping those whose value is ``None``."""
    if not query:
        return {}
    params = {}
    for name, value in query.items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[name] = "true" if value else "false"
        else:
            params[name] = str(value)
    return params


def encode_body(body: Any) -> str | None:
    if body is None:
        return None
    return json.dumps(body, separators=(",", ":"), default=str)


def build_headers(
    descriptor: RequestDescriptor,
    config: ClientConfig,
    idempotency_key: str | None,
) -> dict[str, str]:
    """Assemble the headers for one attempt.

    Caller headers are merged last but can never replace the
    authentication, space or idempotency headers.
    """
    headers = {
        "Authorization": f"Bearer {config.access_token}",
        "Monime-Space-Id": config.space_id,
        "Accept": "application/json",
        "User-Agent": config.user_agent,
    }
    if config.api_version:
        headers["Monime-Version"] = config.api_version
    if descriptor.body is not None:
        headers["Content-Type"] = "application/json"
    if idempotency_key is not None:
        headers["Idempotency-Key"] = idempotency_key
    for name, value in descriptor.options.headers.items():
        if name.lower() in PROTECTED_HEADERS:
            continue
        headers[name] = value
    return headers


def api_error_from_response(response: httpx.Response) -> MonimeApiError:
    """Translate a non-2xx response into :class:`MonimeApiError`."""
    status = response.status_code
    reason = "unknown_error"
    message = response.reason_phrase or f"HTTP {status}"
    details: list = []
    try:
        payload = response.json()
    except ValueError:
        payload = None
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict):
        reason = error.get("reason") or reason
        message = error.get("message") or message
        if isinstance(error.get("details"), list):
            details = error["details"]
    retry_after = None
    if status == 429:
        retry_after = parse_retry_after(response.headers.get("Retry-After"))
    return MonimeApiError(
        message, status, reason, details, retry_after=retry_after
    )


def decode_success(response: httpx.Response) -> dict:
    if not response.content:
        return {"success": True, "result": None}
    try:
        return response.json()
    except ValueError as exc:
        raise MonimeApiError(
            "Response body is not valid JSON",
            response.status_code,
            "invalid_response",
        ) from exc


async def _attempt(
    client: httpx.AsyncClient,
    request: httpx.Request,
    timeout: float,
) -> httpx.Response:
    """Send one request, mapping httpx request failures onto the taxonomy.

    Anything httpx raises while sending or reading the response, including
    undecodable content encodings and redirect loops, becomes a
    :class:`MonimeNetworkError`.
    """
    url = str(request.url)
    try:
        async with asyncio.timeout(timeout):
            response = await client.send(request)
    except (TimeoutError, httpx.TimeoutException) as exc:
        raise MonimeTimeoutError(timeout, url) from exc
    except httpx.RequestError as exc:
        raise MonimeNetworkError(
            f"Network error while requesting {url}: {exc}", cause=exc
        ) from exc
    return response


async def dispatch(
    descriptor: RequestDescriptor,
    config: ClientConfig,
    *,
    client: httpx.AsyncClient | None = None,
    sleep: Sleep = asyncio.sleep,
    random: Callable[[], float] = _random.random,
) -> dict:
    """Perform ``descriptor`` against the API and return the decoded envelope.

    :param descriptor: The logical call to make.
    :param config: Active client configuration, never modified.
    :param client: Shared ``httpx.AsyncClient``. A temporary one is used
        when omitted.
    :param sleep: Coroutine used to wait between attempts.
    :param random: Source of jitter in ``[0, 1)``.
    :return: The success envelope exactly as sent by the API.
    :raises MonimeApiError: The API rejected the call.
    :raises MonimeTimeoutError: An attempt exceeded the timeout.
    :raises MonimeNetworkError: Retries ran out on transport failures.
    :raises MonimeCancelledError: The cancellation token fired.
    """
    if client is None:
        async with httpx.AsyncClient() as temporary:
            return await dispatch(
                descriptor,
                config,
                client=temporary,
                sleep=sleep,
                random=random,
            )

    options = descriptor.options
    token = options.cancellation
    timeout = options.timeout if options.timeout is not None else config.timeout
    max_retries = (
        options.max_retries
        if options.max_retries is not None
        else config.max_retries
    )
    idempotency_key = None
    if descriptor.is_mutating:
        idempotency_key = options.idempotency_key or str(uuid.uuid4())

    url = f"{config.base_url}{descriptor.path}"
    params = encode_query(descriptor.query)
    content = encode_body(descriptor.body)
    state = RetryState()

    while True:
        request = client.build_request(
            descriptor.method,
            url,
            params=params,
            content=content,
            headers=build_headers(descriptor, config, idempotency_key),
            timeout=timeout,
        )
        logger.debug(
            "Monime %s %s (attempt %d)",
            descriptor.method,
            request.url,
            state.attempt + 1,
        )
        try:
            response = await run_cancellable(
                _attempt(client, request, timeout), token
            )
            if response.is_success:
                return decode_success(response)
            raise api_error_from_response(response)
        except MonimeError as exc:
            state.last_error = exc
            if not is_retryable(exc) or state.attempt >= max_retries:
                raise
            delay = compute_delay(state.attempt, config, exc, random=random)
            logger.warning(
                "Monime %s %s failed (%s), retry %d/%d in %.2fs",
                descriptor.method,
                descriptor.path,
                exc.message,
                state.attempt + 1,
                max_retries,
                delay,
            )

        await run_cancellable(sleep(delay), token)
        state.attempt += 1


class MonimeHttpClient:
    """Binds a :class:`ClientConfig` to the dispatch core.

    Resource modules hold one of these and call :meth:`request`. When
    ``client`` is given it is reused for every call; otherwise each call
    opens its own ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        client: httpx.AsyncClient | None = None,
        sleep: Sleep = asyncio.sleep,
        random: Callable[[], float] = _random.random,
    ) -> None:
        self.config = config
        self.client = client
        self._sleep = sleep
        self._random = random

    @property
    def should_validate(self) -> bool:
        return self.config.validate_inputs

    async def dispatch(self, descriptor: RequestDescriptor) -> dict:
        return await dispatch(
            descriptor,
            self.config,
            client=self.client,
            sleep=self._sleep,
            random=self._random,
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        body: Any = None,
        options: RequestOptions | None = None,
    ) -> dict:
        descriptor = RequestDescriptor(
            method=method,
            path=path,
            query=query,
            body=body,
            options=options or RequestOptions(),
        )
        return await self.dispatch(descriptor)
