"""Explicit cancellation token threaded through request dispatch."""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from .errors import MonimeCancelledError


T = TypeVar("T")


class CancellationToken:
    """One-shot signal a caller fires to abandon an in-flight request.

    The token may be shared by several requests; firing it cancels all
    of them. It cannot be reset.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.reason: str | None = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self, reason: str | None = None) -> None:
        if not self._event.is_set():
            self.reason = reason
            self._event.set()

    async def wait(self) -> None:
        await self._event.wait()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise MonimeCancelledError(self.reason or "Request was cancelled")


async def run_cancellable(
    awaitable: Awaitable[T], token: CancellationToken | None
) -> T:
    """Await ``awaitable`` unless ``token`` fires first.

    When the token wins, the pending work is cancelled and
    :class:`MonimeCancelledError` is raised.
    """
    if token is None:
        return await awaitable
    if token.cancelled:
        if asyncio.iscoroutine(awaitable):
            awaitable.close()
        token.raise_if_cancelled()

    work = asyncio.ensure_future(awaitable)
    waiter = asyncio.ensure_future(token.wait())
    try:
        await asyncio.wait(
            {work, waiter}, return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        pending = [t for t in (work, waiter) if not t.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    if waiter.done() and not waiter.cancelled():
        if work.done() and not work.cancelled():
            # Retrieve the outcome so asyncio does not warn about it.
            work.exception()
        token.raise_if_cancelled()
    return work.result()
