"""Bank and mobile money provider directories."""

from pydantic import TypeAdapter

from ..config import RequestOptions
from ..schemas import BankProviderIdSchema
from ..schemas import CountryCodeSchema
from ..schemas import LimitSchema
from ..schemas import MomoProviderIdSchema
from ..types import ApiListResponse
from ..types import ApiResponse
from ..types import Provider
from .base import Resource


class ProviderDirectory(Resource):
    """Read-only listing of payment providers available per country."""

    provider_id_schema: TypeAdapter

    async def get(
        self, provider_id: str, options: RequestOptions | None = None
    ) -> ApiResponse[Provider]:
        self._validate((self.provider_id_schema, provider_id))
        return await self._http.request(
            "GET", self._path(provider_id), options=options
        )

    async def list(
        self,
        *,
        country: str,
        limit: int | None = None,
        after: str | None = None,
        options: RequestOptions | None = None,
    ) -> ApiListResponse[Provider]:
        """List providers operating in ``country`` (ISO 3166 alpha-2)."""
        checks = [(CountryCodeSchema, country)]
        if limit is not None:
            checks.append((LimitSchema, limit))
        self._validate(*checks)
        return await self._http.request(
            "GET",
            self.base_path,
            query={"country": country, "limit": limit, "after": after},
            options=options,
        )


class Banks(ProviderDirectory):
    base_path = "/banks"
    provider_id_schema = BankProviderIdSchema


class Momos(ProviderDirectory):
    base_path = "/momos"
    provider_id_schema = MomoProviderIdSchema
