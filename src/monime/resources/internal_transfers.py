"""Internal transfers between financial accounts of the same space."""

from ..config import RequestOptions
from ..schemas import CreateInternalTransferInputSchema
from ..schemas import IdSchema
from ..schemas import LimitSchema
from ..schemas import UpdateInternalTransferInputSchema
from ..types import ApiListResponse
from ..types import ApiResponse
from ..types import DeleteResult
from ..types import InternalTransfer
from .base import Resource


class InternalTransfers(Resource):
    base_path = "/internal-transfers"

    async def create(
        self, data: dict, options: RequestOptions | None = None
    ) -> ApiResponse[InternalTransfer]:
        """Move funds from one financial account to another.

        POST /internal-transfers
        """
        self._validate((CreateInternalTransferInputSchema, data))
        return await self._http.request(
            "POST", self.base_path, body=data, options=options
        )

    async def get(
        self, transfer_id: str, options: RequestOptions | None = None
    ) -> ApiResponse[InternalTransfer]:
        self._validate((IdSchema, transfer_id))
        return await self._http.request(
            "GET", self._path(transfer_id), options=options
        )

    async def list(
        self,
        *,
        status: str | None = None,
        source_financial_account_id: str | None = None,
        destination_financial_account_id: str | None = None,
        financial_transaction_reference: str | None = None,
        limit: int | None = None,
        after: str | None = None,
        options: RequestOptions | None = None,
    ) -> ApiListResponse[InternalTransfer]:
        if limit is not None:
            self._validate((LimitSchema, limit))
        return await self._http.request(
            "GET",
            self.base_path,
            query={
                "status": status,
                "sourceFinancialAccountId": source_financial_account_id,
                "destinationFinancialAccountId": (
                    destination_financial_account_id
                ),
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
        transfer_id: str,
        data: dict,
        options: RequestOptions | None = None,
    ) -> ApiResponse[InternalTransfer]:
        self._validate(
            (IdSchema, transfer_id), (UpdateInternalTransferInputSchema, data)
        )
        return await self._http.request(
            "PATCH", self._path(transfer_id), body=data, options=options
        )

    async def delete(
        self, transfer_id: str, options: RequestOptions | None = None
    ) -> ApiResponse[DeleteResult]:
        """Cancel a transfer that has not been processed yet.

        DELETE /internal-transfers/{id}
        """
        self._validate((IdSchema, transfer_id))
        return await self._http.request(
            "DELETE", self._path(transfer_id), options=options
        )
