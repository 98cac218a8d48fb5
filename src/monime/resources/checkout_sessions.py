"""Hosted checkout sessions."""

from ..config import RequestOptions
from ..schemas import CreateCheckoutSessionInputSchema
from ..schemas import IdSchema
from ..schemas import LimitSchema
from ..types import ApiListResponse
from ..types import ApiResponse
from ..types import CheckoutSession
from ..types import DeleteResult
from .base import Resource


class CheckoutSessions(Resource):
    base_path = "/checkout-sessions"

    async def create(
        self, data: dict, options: RequestOptions | None = None
    ) -> ApiResponse[CheckoutSession]:
        """Create a checkout session and get the hosted ``redirectUrl``.

        POST /checkout-sessions
        """
        self._validate((CreateCheckoutSessionInputSchema, data))
        return await self._http.request(
            "POST", self.base_path, body=data, options=options
        )

    async def get(
        self, session_id: str, options: RequestOptions | None = None
    ) -> ApiResponse[CheckoutSession]:
        self._validate((IdSchema, session_id))
        return await self._http.request(
            "GET", self._path(session_id), options=options
        )

    async def list(
        self,
        *,
        limit: int | None = None,
        after: str | None = None,
        options: RequestOptions | None = None,
    ) -> ApiListResponse[CheckoutSession]:
        if limit is not None:
            self._validate((LimitSchema, limit))
        return await self._http.request(
            "GET",
            self.base_path,
            query={"limit": limit, "after": after},
            options=options,
        )

    async def delete(
        self, session_id: str, options: RequestOptions | None = None
    ) -> ApiResponse[DeleteResult]:
        self._validate((IdSchema, session_id))
        return await self._http.request(
            "DELETE", self._path(session_id), options=options
        )
