"""Pydantic schemas describing the inputs accepted by the Monime API.

Models validate wire-shaped (camelCase) dicts; Python attribute names are
snake_case and mapped through an alias generator.
"""

from typing import Annotated
from typing import Any
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import StringConstraints
from pydantic import TypeAdapter
from pydantic import model_validator
from pydantic.alias_generators import to_camel


NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]
PhoneNumber = Annotated[str, StringConstraints(min_length=6, max_length=16)]
Metadata = dict[str, Any]

IdSchema = TypeAdapter(NonEmptyStr)
LimitSchema = TypeAdapter(Annotated[int, Field(ge=1, le=100)])
CountryCodeSchema = TypeAdapter(
    Annotated[str, StringConstraints(pattern=r"^[A-Z]{2}$")]
)
BankProviderIdSchema = TypeAdapter(NonEmptyStr)
MomoProviderIdSchema = TypeAdapter(NonEmptyStr)
ReceiptOrderNumberSchema = TypeAdapter(NonEmptyStr)


class Schema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class AmountSchema(Schema):
    currency: Literal["SLE", "USD"]
    value: int = Field(ge=0)


class CustomerSchema(Schema):
    name: NonEmptyStr | None = None


class AccountRefSchema(Schema):
    id: NonEmptyStr


# --- Financial accounts ---


class CreateFinancialAccountInputSchema(Schema):
    name: NonEmptyStr
    currency: Literal["SLE", "USD"]
    reference: NonEmptyStr | None = None
    description: str | None = None
    metadata: Metadata | None = None


class UpdateFinancialAccountInputSchema(Schema):
    name: NonEmptyStr | None = None
    reference: NonEmptyStr | None = None
    description: str | None = None
    metadata: Metadata | None = None


# --- Internal transfers ---


class CreateInternalTransferInputSchema(Schema):
    amount: AmountSchema
    source_financial_account: AccountRefSchema
    destination_financial_account: AccountRefSchema
    description: str | None = None
    metadata: Metadata | None = None

    @model_validator(mode="after")
    def check_distinct_accounts(self):
        if self.source_financial_account.id == (
            self.destination_financial_account.id
        ):
            raise ValueError(
                "source and destination financial accounts must differ"
            )
        return self


class UpdateInternalTransferInputSchema(Schema):
    description: str | None = None
    metadata: Metadata | None = None


# --- Payment codes ---


class RecurrentPaymentTargetSchema(Schema):
    expected_payment_count: int | None = Field(default=None, ge=1)
    expected_payment_total: AmountSchema | None = None


class CreatePaymentCodeInputSchema(Schema):
    name: NonEmptyStr
    mode: Literal["one_time", "recurrent"] | None = None
    amount: AmountSchema | None = None
    duration: NonEmptyStr | None = None
    customer: CustomerSchema | None = None
    reference: NonEmptyStr | None = None
    authorized_providers: list[NonEmptyStr] | None = None
    authorized_phone_number: PhoneNumber | None = None
    recurrent_payment_target: RecurrentPaymentTargetSchema | None = None
    financial_account_id: NonEmptyStr | None = None
    metadata: Metadata | None = None


class UpdatePaymentCodeInputSchema(Schema):
    name: NonEmptyStr | None = None
    status: Literal["active", "inactive"] | None = None
    amount: AmountSchema | None = None
    duration: NonEmptyStr | None = None
    customer: CustomerSchema | None = None
    reference: str | None = None
    authorized_providers: list[NonEmptyStr] | None = None
    authorized_phone_number: PhoneNumber | None = None
    recurrent_payment_target: RecurrentPaymentTargetSchema | None = None
    financial_account_id: NonEmptyStr | None = None
    metadata: Metadata | None = None


# --- Payments ---


class UpdatePaymentInputSchema(Schema):
    name: NonEmptyStr | None = None
    metadata: Metadata | None = None


# --- Payouts ---


class PayoutDestinationSchema(Schema):
    type: Literal["momo", "bank", "wallet"]
    provider_id: NonEmptyStr
    phone_number: PhoneNumber | None = None
    account_number: NonEmptyStr | None = None
    wallet_id: NonEmptyStr | None = None

    @model_validator(mode="after")
    def check_destination_target(self):
        required = {
            "momo": "phone_number",
            "bank": "account_number",
            "wallet": "wallet_id",
        }[self.type]
        if getattr(self, required) is None:
            raise ValueError(
                f"{to_camel(required)} is required for {self.type} payouts"
            )
        return self


class PayoutSourceSchema(Schema):
    financial_account_id: NonEmptyStr | None = None


class CreatePayoutInputSchema(Schema):
    amount: AmountSchema
    destination: PayoutDestinationSchema
    source: PayoutSourceSchema | None = None
    metadata: Metadata | None = None


class UpdatePayoutInputSchema(Schema):
    metadata: Metadata | None = None


# --- Checkout sessions ---


class LineItemSchema(Schema):
    type: Literal["custom"] = "custom"
    name: NonEmptyStr
    price: AmountSchema
    quantity: int = Field(ge=1)
    reference: str | None = None
    description: str | None = None
    images: list[str] | None = None


class CreateCheckoutSessionInputSchema(Schema):
    name: NonEmptyStr
    line_items: list[LineItemSchema] = Field(min_length=1)
    success_url: NonEmptyStr | None = None
    cancel_url: NonEmptyStr | None = None
    description: str | None = None
    reference: str | None = None
    financial_account_id: NonEmptyStr | None = None
    callback_state: str | None = None
    branding_options: dict[str, Any] | None = None
    metadata: Metadata | None = None


# --- Webhooks ---


class WebhookVerificationMethodSchema(Schema):
    type: Literal["HS256", "ES256"]
    secret: str | None = None

    @model_validator(mode="after")
    def check_secret_length(self):
        if self.type == "HS256" and (
            self.secret is None or len(self.secret) < 32
        ):
            raise ValueError("HS256 secret must be at least 32 characters")
        return self


class CreateWebhookInputSchema(Schema):
    name: NonEmptyStr
    url: Annotated[str, StringConstraints(pattern=r"^https?://")]
    events: list[NonEmptyStr] = Field(min_length=1)
    api_release: NonEmptyStr | None = None
    enabled: bool | None = None
    verification_method: WebhookVerificationMethodSchema | None = None
    headers: dict[str, str] | None = None
    alert_emails: list[NonEmptyStr] | None = None
    metadata: Metadata | None = None


class UpdateWebhookInputSchema(Schema):
    name: NonEmptyStr | None = None
    url: Annotated[str, StringConstraints(pattern=r"^https?://")] | None = None
    events: list[NonEmptyStr] | None = Field(default=None, min_length=1)
    enabled: bool | None = None
    verification_method: WebhookVerificationMethodSchema | None = None
    headers: dict[str, str] | None = None
    alert_emails: list[NonEmptyStr] | None = None
    metadata: Metadata | None = None


# --- Receipts ---


class EntitlementSchema(Schema):
    key: NonEmptyStr
    units: int = Field(default=1, ge=1)


class RedeemReceiptInputSchema(Schema):
    redeem_all: bool | None = None
    entitlements: list[EntitlementSchema] | None = None
    metadata: Metadata | None = None

    @model_validator(mode="after")
    def check_something_to_redeem(self):
        if not self.redeem_all and not self.entitlements:
            raise ValueError("either redeemAll or entitlements is required")
        return self


# --- USSD OTP ---


class CreateUssdOtpInputSchema(Schema):
    authorized_phone_number: PhoneNumber
    verification_message: str | None = Field(default=None, max_length=255)
    duration: NonEmptyStr | None = None
    metadata: Metadata | None = None
