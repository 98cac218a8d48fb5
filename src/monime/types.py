"""Monime API types and enums."""

from enum import StrEnum
from enum import auto
from enum import unique
from typing import Any
from typing import Generic
from typing import NotRequired
from typing import TypedDict
from typing import TypeVar


T = TypeVar("T")


class AutoName(StrEnum):
    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return name.lower()


@unique
class Currency(StrEnum):
    """Currencies supported by Monime."""

    SLE = "SLE"
    USD = "USD"


@unique
class PaymentCodeMode(AutoName):
    ONE_TIME = auto()
    RECURRENT = auto()


@unique
class PaymentCodeStatus(AutoName):
    PENDING = auto()
    PROCESSING = auto()
    EXPIRED = auto()
    COMPLETED = auto()
    CANCELLED = auto()


@unique
class PayoutStatus(AutoName):
    PENDING = auto()
    PROCESSING = auto()
    COMPLETED = auto()
    FAILED = auto()


@unique
class TransferStatus(AutoName):
    PENDING = auto()
    PROCESSING = auto()
    COMPLETED = auto()
    FAILED = auto()


@unique
class CheckoutSessionStatus(AutoName):
    PENDING = auto()
    COMPLETED = auto()
    CANCELLED = auto()
    EXPIRED = auto()


@unique
class TransactionType(AutoName):
    """Direction of a financial transaction."""

    CREDIT = auto()
    DEBIT = auto()


@unique
class ReceiptStatus(AutoName):
    NOT_REDEEMED = auto()
    PARTIALLY_REDEEMED = auto()
    FULLY_REDEEMED = auto()


@unique
class PayoutDestinationType(AutoName):
    MOMO = auto()
    BANK = auto()
    WALLET = auto()


@unique
class WebhookVerificationType(StrEnum):
    HS256 = "HS256"
    ES256 = "ES256"


# --- Envelopes ---


class Pagination(TypedDict):
    """Cursor block of a list response."""

    count: int
    next: str | None


class ApiResponse(TypedDict, Generic[T]):
    """Envelope of a single-resource response."""

    success: bool
    result: T


class ApiListResponse(TypedDict, Generic[T]):
    """Envelope of a list response."""

    success: bool
    result: list[T]
    pagination: Pagination


class ApiErrorBody(TypedDict):
    """``error`` member of a failure envelope."""

    code: int
    reason: str
    message: str
    details: list[Any]


# --- Shared shapes ---


class Amount(TypedDict):
    """Money in minor units, e.g. ``{"currency": "SLE", "value": 50000}``."""

    currency: str
    value: int


class Customer(TypedDict, total=False):
    name: str


class FinancialAccountRef(TypedDict):
    id: str


# --- Resources ---


class FinancialAccount(TypedDict, total=False):
    id: str
    uvan: str
    name: str
    currency: str
    reference: str
    description: str
    balance: dict
    createTime: str
    updateTime: str
    metadata: dict


class FinancialTransaction(TypedDict, total=False):
    id: str
    type: str
    amount: Amount
    timestamp: str
    reference: str
    financialAccount: dict
    originatingReversal: dict
    originatingFee: dict
    ownershipGraph: dict
    metadata: dict


class InternalTransfer(TypedDict, total=False):
    id: str
    status: str
    amount: Amount
    sourceFinancialAccount: FinancialAccountRef
    destinationFinancialAccount: FinancialAccountRef
    financialTransactionReference: str
    description: str
    failureDetail: dict
    ownershipGraph: dict
    createTime: str
    updateTime: str
    metadata: dict


class PaymentCode(TypedDict, total=False):
    id: str
    mode: str
    status: str
    name: str
    amount: Amount
    enable: bool
    expireTime: str
    customer: Customer
    ussdCode: str
    reference: str
    authorizedProviders: list[str]
    authorizedPhoneNumber: str
    recurrentPaymentTarget: dict
    financialAccountId: str
    processedPaymentData: dict
    createTime: str
    updateTime: str
    ownershipGraph: dict
    metadata: dict


class Payment(TypedDict, total=False):
    id: str
    status: str
    amount: Amount
    channel: dict
    name: str
    reference: str
    orderNumber: str
    financialAccountId: str
    financialTransactionReference: str
    fees: list[dict]
    ownershipGraph: dict
    createTime: str
    updateTime: str
    metadata: dict


class PayoutDestination(TypedDict, total=False):
    type: str
    providerId: str
    phoneNumber: str
    accountNumber: str
    walletId: str


class Payout(TypedDict, total=False):
    id: str
    status: str
    amount: Amount
    source: dict
    destination: PayoutDestination
    fees: list[dict]
    charges: list[dict]
    failureDetail: dict
    ownershipGraph: dict
    createTime: str
    updateTime: str
    metadata: dict


class LineItem(TypedDict, total=False):
    type: str
    name: str
    price: Amount
    quantity: int
    reference: str
    description: str
    images: list[str]


class CheckoutSession(TypedDict, total=False):
    id: str
    status: str
    name: str
    orderNumber: str
    reference: str
    description: str
    redirectUrl: str
    cancelUrl: str
    successUrl: str
    lineItems: dict
    financialAccountId: str
    brandingOptions: dict
    expireTime: str
    createTime: str
    ownershipGraph: dict
    metadata: dict


class Webhook(TypedDict, total=False):
    id: str
    name: str
    url: str
    enabled: bool
    events: list[str]
    apiRelease: str
    verificationMethod: dict
    headers: dict
    alertEmails: list[str]
    createTime: str
    updateTime: str
    metadata: dict


class Entitlement(TypedDict):
    key: str
    units: NotRequired[int]


class Receipt(TypedDict, total=False):
    status: str
    orderNumber: str
    orderName: str
    orderAmount: Amount
    entitlements: list[dict]
    createTime: str
    updateTime: str
    metadata: dict


class RedeemResult(TypedDict, total=False):
    redeem: bool
    receipt: Receipt


class UssdOtp(TypedDict, total=False):
    id: str
    status: str
    dialCode: str
    authorizedPhoneNumber: str
    verificationMessage: str
    expireTime: str
    createTime: str
    metadata: dict


class Provider(TypedDict, total=False):
    """A bank or mobile money provider from the directory endpoints."""

    providerId: str
    name: str
    country: str
    status: dict
    featureSet: dict
    createTime: str
    updateTime: str


class DeleteResult(TypedDict, total=False):
    id: str
    deleted: bool
