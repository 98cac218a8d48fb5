"""Payouts to mobile money wallets, bank accounts and digital wallets."""

from ..config import RequestOptions
from ..schemas import CreatePayoutInputSchema
from ..schemas import IdSchema
from ..schemas import LimitSchema
from ..schemas import UpdatePayoutInputSchema
from ..types import ApiListResponse
from ..types import ApiResponse
from ..types import DeleteResult
from ..types import Payout
from .base import Resource


class Payouts(Resource):
    base_path = "/payouts"

    async def create(
        self, data: dict, options: RequestOptions | None = None
    ) -> ApiResponse[Payout]:
        """Disburse funds to an external destination.

        POST /payouts

        Retries reuse the same ``Idempotency-Key``, so a payout is never
        sent twice because of a transient failure. Pass
        ``RequestOptions(idempotency_key=...)`` to make the key stable
        across separate calls as well.
        """
        self._validate((CreatePayoutInputSchema, data))
        return await self._http.request(
            "POST", self.base_path, body=data, options=options
        )

    async def get(
        self, payout_id: str, options: RequestOptions | None = None
    ) -> ApiResponse[Payout]:
        self._validate((IdSchema, payout_id))
        return await self._http.request(
            "GET", self._path(payout_id), options=options
        )

    async def list(
        self,
        *,
        status: str | None = None,
        source_financial_account_id: str | None = None,
        financial_transaction_reference: str | None = None,
        limit: int | None = None,
        after: str | None = None,
        options: RequestOptions | None = None,
    ) -> ApiListResponse[Payout]:
        if limit is not None:
            self._validate((LimitSchema, limit))
        return await self._http.request(
            "GET",
            self.base_path,
            query={
                "status": status,
                "sourceFinancialAccountId": source_financial_account_id,
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
        payout_id: str,
        data: dict,
        options: RequestOptions | None = None,
    ) -> ApiResponse[Payout]:
        self._validate((IdSchema, payout_id), (UpdatePayoutInputSchema, data))
        return await self._http.request(
            "PATCH", self._path(payout_id), body=data, options=options
        )

    async def delete(
        self, payout_id: str, options: RequestOptions | None = None
    ) -> ApiResponse[DeleteResult]:
        """Cancel a pending payout.

        DELETE /payouts/{id}
        """
        self._validate((IdSchema, payout_id))
        return await self._http.request(
            "DELETE", self._path(payout_id), options=options
        )
