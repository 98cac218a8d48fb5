"""USSD one-time passwords for phone number verification."""

from ..config import RequestOptions
from ..schemas import CreateUssdOtpInputSchema
from ..schemas import IdSchema
from ..schemas import LimitSchema
from ..types import ApiListResponse
from ..types import ApiResponse
from ..types import DeleteResult
from ..types import UssdOtp
from .base import Resource


class UssdOtps(Resource):
    base_path = "/ussd-otps"

    async def create(
        self, data: dict, options: RequestOptions | None = None
    ) -> ApiResponse[UssdOtp]:
        """Create an OTP the authorized phone number verifies by dialing.

        POST /ussd-otps
        """
        self._validate((CreateUssdOtpInputSchema, data))
        return await self._http.request(
            "POST", self.base_path, body=data, options=options
        )

    async def get(
        self, otp_id: str, options: RequestOptions | None = None
    ) -> ApiResponse[UssdOtp]:
        self._validate((IdSchema, otp_id))
        return await self._http.request(
            "GET", self._path(otp_id), options=options
        )

    async def list(
        self,
        *,
        limit: int | None = None,
        after: str | None = None,
        options: RequestOptions | None = None,
    ) -> ApiListResponse[UssdOtp]:
        if limit is not None:
            self._validate((LimitSchema, limit))
        return await self._http.request(
            "GET",
            self.base_path,
            query={"limit": limit, "after": after},
            options=options,
        )

    async def delete(
        self, otp_id: str, options: RequestOptions | None = None
    ) -> ApiResponse[DeleteResult]:
        self._validate((IdSchema, otp_id))
        return await self._http.request(
            "DELETE", self._path(otp_id), options=options
        )
