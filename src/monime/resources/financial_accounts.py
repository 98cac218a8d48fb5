"""Financial accounts: wallets holding funds inside a Monime space."""

from ..config import RequestOptions
from ..schemas import CreateFinancialAccountInputSchema
from ..schemas import IdSchema
from ..schemas import LimitSchema
from ..schemas import UpdateFinancialAccountInputSchema
from ..types import ApiListResponse
from ..types import ApiResponse
from ..types import FinancialAccount
from .base import Resource


class FinancialAccounts(Resource):
    base_path = "/financial-accounts"

    async def create(
        self, data: dict, options: RequestOptions | None = None
    ) -> ApiResponse[FinancialAccount]:
        """Create a financial account.

        POST /financial-accounts
        """
        self._validate((CreateFinancialAccountInputSchema, data))
        return await self._http.request(
            "POST", self.base_path, body=data, options=options
        )

    async def get(
        self,
        account_id: str,
        *,
        with_balance: bool | None = None,
        options: RequestOptions | None = None,
    ) -> ApiResponse[FinancialAccount]:
        """Retrieve a financial account, optionally with its balance.

        GET /financial-accounts/{id}
        """
        self._validate((IdSchema, account_id))
        return await self._http.request(
            "GET",
            self._path(account_id),
            query={"withBalance": with_balance},
            options=options,
        )

    async def list(
        self,
        *,
        uvan: str | None = None,
        reference: str | None = None,
        with_balance: bool | None = None,
        limit: int | None = None,
        after: str | None = None,
        options: RequestOptions | None = None,
    ) -> ApiListResponse[FinancialAccount]:
        """List financial accounts.

        GET /financial-accounts
        """
        if limit is not None:
            self._validate((LimitSchema, limit))
        return await self._http.request(
            "GET",
            self.base_path,
            query={
                "uvan": uvan,
                "reference": reference,
                "withBalance": with_balance,
                "limit": limit,
                "after": after,
            },
            options=options,
        )

    async def update(
        self,
        account_id: str,
        data: dict,
        options: RequestOptions | None = None,
    ) -> ApiResponse[FinancialAccount]:
        """Update name, reference, description or metadata of an account.

        PATCH /financial-accounts/{id}
        """
        self._validate(
            (IdSchema, account_id), (UpdateFinancialAccountInputSchema, data)
        )
        return await self._http.request(
            "PATCH", self._path(account_id), body=data, options=options
        )
