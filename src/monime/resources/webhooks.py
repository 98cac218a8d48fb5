"""Webhook endpoint registrations."""

from ..config import RequestOptions
from ..schemas import CreateWebhookInputSchema
from ..schemas import IdSchema
from ..schemas import LimitSchema
from ..schemas import UpdateWebhookInputSchema
from ..types import ApiListResponse
from ..types import ApiResponse
from ..types import DeleteResult
from ..types import Webhook
from .base import Resource


class Webhooks(Resource):
    base_path = "/webhooks"

    async def create(
        self, data: dict, options: RequestOptions | None = None
    ) -> ApiResponse[Webhook]:
        """Register a webhook endpoint.

        POST /webhooks

        With ``HS256`` verification the secret must be at least 32
        characters. With ``ES256`` the API generates a key pair and
        returns the public key in ``verificationMethod``.
        """
        self._validate((CreateWebhookInputSchema, data))
        return await self._http.request(
            "POST", self.base_path, body=data, options=options
        )

    async def get(
        self, webhook_id: str, options: RequestOptions | None = None
    ) -> ApiResponse[Webhook]:
        self._validate((IdSchema, webhook_id))
        return await self._http.request(
            "GET", self._path(webhook_id), options=options
        )

    async def list(
        self,
        *,
        limit: int | None = None,
        after: str | None = None,
        options: RequestOptions | None = None,
    ) -> ApiListResponse[Webhook]:
        if limit is not None:
            self._validate((LimitSchema, limit))
        return await self._http.request(
            "GET",
            self.base_path,
            query={"limit": limit, "after": after},
            options=options,
        )

    async def update(
        self,
        webhook_id: str,
        data: dict,
        options: RequestOptions | None = None,
    ) -> ApiResponse[Webhook]:
        self._validate((IdSchema, webhook_id), (UpdateWebhookInputSchema, data))
        return await self._http.request(
            "PATCH", self._path(webhook_id), body=data, options=options
        )

    async def delete(
        self, webhook_id: str, options: RequestOptions | None = None
    ) -> ApiResponse[DeleteResult]:
        self._validate((IdSchema, webhook_id))
        return await self._http.request(
            "DELETE", self._path(webhook_id), options=options
        )
