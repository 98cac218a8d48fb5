"""Async client for the Monime REST API."""

import asyncio
import logging
import random
from collections.abc import Callable

import httpx

from .config import ClientConfig
from .http import MonimeHttpClient
from .http import Sleep
from .resources import Banks
from .resources import CheckoutSessions
from .resources import FinancialAccounts
from .resources import FinancialTransactions
from .resources import InternalTransfers
from .resources import Momos
from .resources import PaymentCodes
from .resources import Payments
from .resources import Payouts
from .resources import Receipts
from .resources import UssdOtps
from .resources import Webhooks


logger = logging.getLogger(__name__)


class MonimeClient:
    """Async client for the Monime API.

    Every resource is exposed as an attribute and every call goes through
    the same dispatch core, so authentication, idempotency, timeouts and
    retries behave identically everywhere. Use it as an async context
    manager to reuse one connection pool::

        async with MonimeClient(space_id="spc-...", access_token="...") as client:
            response = await client.payout.create({...})

    Outside of ``async with`` each request opens its own
    ``httpx.AsyncClient``.

    :param config: Complete configuration. When omitted one is built
        from the keyword arguments.
    :param http_client: Externally managed ``httpx.AsyncClient``; it is
        never closed by this client.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        sleep: Sleep = asyncio.sleep,
        jitter: Callable[[], float] = random.random,
        **settings,
    ) -> None:
        if config is None:
            config = ClientConfig(**settings)
        elif settings:
            raise TypeError(
                "Pass either a ClientConfig or keyword settings, not both"
            )
        self.config = config
        self._owns_client: bool = False
        self._http = MonimeHttpClient(
            config, client=http_client, sleep=sleep, random=jitter
        )

        self.financial_account = FinancialAccounts(self._http)
        self.financial_transaction = FinancialTransactions(self._http)
        self.internal_transfer = InternalTransfers(self._http)
        self.payment_code = PaymentCodes(self._http)
        self.payment = Payments(self._http)
        self.payout = Payouts(self._http)
        self.checkout_session = CheckoutSessions(self._http)
        self.webhook = Webhooks(self._http)
        self.receipt = Receipts(self._http)
        self.ussd_otp = UssdOtps(self._http)
        self.bank = Banks(self._http)
        self.momo = Momos(self._http)

    @classmethod
    def from_env(cls, **overrides) -> "MonimeClient":
        """Build a client from ``MONIME_*`` environment variables."""
        return cls(ClientConfig.from_env(**overrides))

    @property
    def http(self) -> MonimeHttpClient:
        return self._http

    async def __aenter__(self) -> "MonimeClient":
        if self._http.client is None:
            self._http.client = httpx.AsyncClient()
            self._owns_client = True
            logger.debug("Opened HTTP session for space %s", self.config.space_id)
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP session opened by ``async with``."""
        if self._owns_client and self._http.client is not None:
            await self._http.client.aclose()
            self._http.client = None
            self._owns_client = False
