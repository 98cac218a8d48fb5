"""Payment codes: USSD codes customers dial to pay into a space."""

from ..config import RequestOptions
from ..schemas import CreatePaymentCodeInputSchema
from ..schemas import IdSchema
from ..schemas import LimitSchema
from ..schemas import UpdatePaymentCodeInputSchema
from ..types import ApiListResponse
from ..types import ApiResponse
from ..types import DeleteResult
from ..types import PaymentCode
from .base import Resource


class PaymentCodes(Resource):
    """One-time and recurrent USSD payment codes.

    A one-time code accepts a single payment; a recurrent code keeps
    accepting payments until its ``recurrentPaymentTarget`` is met.
    """

    base_path = "/payment-codes"

    async def create(
        self, data: dict, options: RequestOptions | None = None
    ) -> ApiResponse[PaymentCode]:
        """Create a payment code.

        POST /payment-codes

        :param data: Code definition; ``name`` is required.
        :param options: Per-request overrides, e.g. a stable
            ``idempotency_key`` derived from your order id.
        :return: Envelope with the created code, including ``ussdCode``.
        """
        self._validate((CreatePaymentCodeInputSchema, data))
        return await self._http.request(
            "POST", self.base_path, body=data, options=options
        )

    async def get(
        self, code_id: str, options: RequestOptions | None = None
    ) -> ApiResponse[PaymentCode]:
        self._validate((IdSchema, code_id))
        return await self._http.request(
            "GET", self._path(code_id), options=options
        )

    async def list(
        self,
        *,
        status: str | None = None,
        mode: str | None = None,
        ussd_code: str | None = None,
        limit: int | None = None,
        after: str | None = None,
        options: RequestOptions | None = None,
    ) -> ApiListResponse[PaymentCode]:
        if limit is not None:
            self._validate((LimitSchema, limit))
        return await self._http.request(
            "GET",
            self.base_path,
            query={
                "status": status,
                "mode": mode,
                "ussdCode": ussd_code,
                "limit": limit,
                "after": after,
            },
            options=options,
        )

    async def update(
        self,
        code_id: str,
        data: dict,
        options: RequestOptions | None = None,
    ) -> ApiResponse[PaymentCode]:
        """Update a payment code.

        PATCH /payment-codes/{id}

        Fields set to ``None`` are sent as JSON ``null`` and clear the
        stored value.
        """
        self._validate((IdSchema, code_id), (UpdatePaymentCodeInputSchema, data))
        return await self._http.request(
            "PATCH", self._path(code_id), body=data, options=options
        )

    async def delete(
        self, code_id: str, options: RequestOptions | None = None
    ) -> ApiResponse[DeleteResult]:
        self._validate((IdSchema, code_id))
        return await self._http.request(
            "DELETE", self._path(code_id), options=options
        )
