"""Financial transactions: the read-only ledger behind every account."""

from ..config import RequestOptions
from ..schemas import IdSchema
from ..schemas import LimitSchema
from ..types import ApiListResponse
from ..types import ApiResponse
from ..types import FinancialTransaction
from .base import Resource


class FinancialTransactions(Resource):
    base_path = "/financial-transactions"

    async def get(
        self, transaction_id: str, options: RequestOptions | None = None
    ) -> ApiResponse[FinancialTransaction]:
        self._validate((IdSchema, transaction_id))
        return await self._http.request(
            "GET", self._path(transaction_id), options=options
        )

    async def list(
        self,
        *,
        financial_account_id: str | None = None,
        type: str | None = None,
        reference: str | None = None,
        limit: int | None = None,
        after: str | None = None,
        options: RequestOptions | None = None,
    ) -> ApiListResponse[FinancialTransaction]:
        """List ledger entries, filtered by account, direction or reference."""
        if limit is not None:
            self._validate((LimitSchema, limit))
        return await self._http.request(
            "GET",
            self.base_path,
            query={
                "financialAccountId": financial_account_id,
                "type": type,
                "reference": reference,
                "limit": limit,
                "after": after,
            },
            options=options,
        )
