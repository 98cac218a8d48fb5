"""Receipts and entitlement redemption for completed orders."""

from ..config import RequestOptions
from ..schemas import ReceiptOrderNumberSchema
from ..schemas import RedeemReceiptInputSchema
from ..types import ApiResponse
from ..types import Receipt
from ..types import RedeemResult
from .base import Resource


class Receipts(Resource):
    base_path = "/receipts"

    async def get(
        self, order_number: str, options: RequestOptions | None = None
    ) -> ApiResponse[Receipt]:
        """Retrieve the receipt of an order.

        GET /receipts/{orderNumber}
        """
        self._validate((ReceiptOrderNumberSchema, order_number))
        return await self._http.request(
            "GET", self._path(order_number), options=options
        )

    async def redeem(
        self,
        order_number: str,
        data: dict,
        options: RequestOptions | None = None,
    ) -> ApiResponse[RedeemResult]:
        """Redeem all or some entitlements of a receipt.

        POST /receipts/{orderNumber}/redeem

        :param data: Either ``{"redeemAll": True}`` or
            ``{"entitlements": [{"key": ..., "units": ...}]}``.
        """
        self._validate(
            (ReceiptOrderNumberSchema, order_number),
            (RedeemReceiptInputSchema, data),
        )
        return await self._http.request(
            "POST",
            self._path(order_number, "redeem"),
            body=data,
            options=options,
        )
