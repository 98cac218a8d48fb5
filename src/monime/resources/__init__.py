"""Resource modules, one per Monime API resource."""

from .checkout_sessions import CheckoutSessions
from .financial_accounts import FinancialAccounts
from .financial_transactions import FinancialTransactions
from .internal_transfers import InternalTransfers
from .payment_codes import PaymentCodes
from .payments import Payments
from .payouts import Payouts
from .providers import Banks
from .providers import Momos
from .receipts import Receipts
from .ussd_otps import UssdOtps
from .webhooks import Webhooks


__all__ = [
    "Banks",
    "CheckoutSessions",
    "FinancialAccounts",
    "FinancialTransactions",
    "InternalTransfers",
    "Momos",
    "PaymentCodes",
    "Payments",
    "Payouts",
    "Receipts",
    "UssdOtps",
    "Webhooks",
]
