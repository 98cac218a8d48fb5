"""Payments received into the space."""

from ..config import RequestOptions
from ..schemas import IdSchema
from ..schemas import LimitSchema
from ..schemas import UpdatePaymentInputSchema
from ..types import ApiListResponse
from ..types import ApiResponse
from ..types import Payment
from .base import Resource


class Payments(Resource):
    base_path = "/payments"

    async def get(
        self, payment_id: str, options: RequestOptions | None = None
    ) -> ApiResponse[Payment]:
        self._validate((IdSchema, payment_id))
        return await self._http.request(
            "GET", self._path(payment_id), options=options
        )

    async def list(
        self,
        *,
        order_number: str | None = None,
        financial_account_id: str | None = None,
        financial_transaction_reference: str | None = None,
        limit: int | None = None,
        after: str | None = None,
        options: RequestOptions | None = None,
    ) -> ApiListResponse[Payment]:
        if limit is not None:
            self._validate((LimitSchema, limit))
        return await self._http.request(
            "GET",
            self.base_path,
            query={
                "orderNumber": order_number,
                "financialAccountId": financial_account_id,
                "financialTransactionReference": (
                    financial_transaction_reference
                ),
                "limit": limit,
                "after": after,
            },
            options=options,
        )

    async def update(
        self,
        payment_id: str,
        data: dict,
        options: RequestOptions | None = None,
    ) -> ApiResponse[Payment]:
        """Update a payment's name or metadata.

        PATCH /payments/{id}
        """
        self._validate((IdSchema, payment_id), (UpdatePaymentInputSchema, data))
        return await self._http.request(
            "PATCH", self._path(payment_id), body=data, options=options
        )
