"""Tests for resource modules: routing, query mapping and validation."""

import json

import pytest

from monime.config import RequestOptions
from monime.errors import MonimeApiError
from monime.errors import MonimeValidationError

from .conftest import BASE_URL
from .conftest import make_client


OK = {"success": True, "result": {"id": "res-1"}}
OK_LIST = {
    "success": True,
    "result": [],
    "pagination": {"count": 0, "next": None},
}

PAYOUT = {
    "amount": {"currency": "SLE", "value": 1000},
    "destination": {
        "type": "momo",
        "providerId": "m17",
        "phoneNumber": "+23276123456",
    },
}
TRANSFER = {
    "amount": {"currency": "SLE", "value": 500},
    "sourceFinancialAccount": {"id": "fa-main"},
    "destinationFinancialAccount": {"id": "fa-reserve"},
}
CHECKOUT = {
    "name": "Order #123",
    "lineItems": [
        {
            "type": "custom",
            "name": "Product",
            "price": {"currency": "SLE", "value": 10000},
            "quantity": 1,
        }
    ],
    "successUrl": "https://shop.example.com/success",
    "cancelUrl": "https://shop.example.com/cancel",
}
WEBHOOK = {
    "name": "Production Webhook",
    "url": "https://shop.example.com/webhooks/monime",
    "events": ["payment.completed"],
    "verificationMethod": {
        "type": "HS256",
        "secret": "a-secret-that-is-at-least-32-characters",
    },
}

# (resource, method, args, http method, path)
ROUTES = [
    ("financial_account", "create", ({"name": "Ops", "currency": "SLE"},), "POST", "/financial-accounts"),
    ("financial_account", "get", ("fa-1",), "GET", "/financial-accounts/fa-1"),
    ("financial_account", "update", ("fa-1", {"name": "Ops 2"}), "PATCH", "/financial-accounts/fa-1"),
    ("financial_transaction", "get", ("ftx-1",), "GET", "/financial-transactions/ftx-1"),
    ("internal_transfer", "create", (TRANSFER,), "POST", "/internal-transfers"),
    ("internal_transfer", "get", ("trn-1",), "GET", "/internal-transfers/trn-1"),
    ("internal_transfer", "update", ("trn-1", {"description": "x"}), "PATCH", "/internal-transfers/trn-1"),
    ("internal_transfer", "delete", ("trn-1",), "DELETE", "/internal-transfers/trn-1"),
    ("payment_code", "create", ({"name": "Order #1"},), "POST", "/payment-codes"),
    ("payment_code", "get", ("pmc-1",), "GET", "/payment-codes/pmc-1"),
    ("payment_code", "update", ("pmc-1", {"status": "inactive"}), "PATCH", "/payment-codes/pmc-1"),
    ("payment_code", "delete", ("pmc-1",), "DELETE", "/payment-codes/pmc-1"),
    ("payment", "get", ("pay-1",), "GET", "/payments/pay-1"),
    ("payment", "update", ("pay-1", {"metadata": {"a": 1}}), "PATCH", "/payments/pay-1"),
    ("payout", "create", (PAYOUT,), "POST", "/payouts"),
    ("payout", "get", ("po-1",), "GET", "/payouts/po-1"),
    ("payout", "update", ("po-1", {"metadata": {"a": 1}}), "PATCH", "/payouts/po-1"),
    ("payout", "delete", ("po-1",), "DELETE", "/payouts/po-1"),
    ("checkout_session", "create", (CHECKOUT,), "POST", "/checkout-sessions"),
    ("checkout_session", "get", ("cos-1",), "GET", "/checkout-sessions/cos-1"),
    ("checkout_session", "delete", ("cos-1",), "DELETE", "/checkout-sessions/cos-1"),
    ("webhook", "create", (WEBHOOK,), "POST", "/webhooks"),
    ("webhook", "get", ("whk-1",), "GET", "/webhooks/whk-1"),
    ("webhook", "update", ("whk-1", {"enabled": False}), "PATCH", "/webhooks/whk-1"),
    ("webhook", "delete", ("whk-1",), "DELETE", "/webhooks/whk-1"),
    ("receipt", "get", ("ORDER-12345",), "GET", "/receipts/ORDER-12345"),
    ("receipt", "redeem", ("ORDER-12345", {"redeemAll": True}), "POST", "/receipts/ORDER-12345/redeem"),
    ("ussd_otp", "create", ({"authorizedPhoneNumber": "+23276123456"},), "POST", "/ussd-otps"),
    ("ussd_otp", "get", ("uop-1",), "GET", "/ussd-otps/uop-1"),
    ("ussd_otp", "delete", ("uop-1",), "DELETE", "/ussd-otps/uop-1"),
    ("bank", "get", ("slb004",), "GET", "/banks/slb004"),
    ("momo", "get", ("m17",), "GET", "/momos/m17"),
]  # fmt: skip

LISTS = [
    ("financial_account", "/financial-accounts"),
    ("financial_transaction", "/financial-transactions"),
    ("internal_transfer", "/internal-transfers"),
    ("payment_code", "/payment-codes"),
    ("payment", "/payments"),
    ("payout", "/payouts"),
    ("checkout_session", "/checkout-sessions"),
    ("webhook", "/webhooks"),
    ("ussd_otp", "/ussd-otps"),
]


class TestRouting:
    """Every resource method maps to one request on the right path."""

    @pytest.mark.parametrize("resource,method,args,verb,path", ROUTES)
    async def test_route(self, respx_mock, resource, method, args, verb, path):
        route = respx_mock.route(method=verb, url=f"{BASE_URL}{path}").respond(
            json=OK
        )
        client = make_client()
        result = await getattr(getattr(client, resource), method)(*args)
        assert result == OK
        assert route.call_count == 1
        request = route.calls.last.request
        if verb == "GET":
            assert not request.content
            assert "idempotency-key" not in request.headers
        else:
            assert request.headers["idempotency-key"]
        if len(args) > 1 or verb == "POST":
            assert json.loads(request.content) == args[-1]

    @pytest.mark.parametrize("resource,path", LISTS)
    async def test_list_pagination(self, respx_mock, resource, path):
        route = respx_mock.get(f"{BASE_URL}{path}").respond(json=OK_LIST)
        client = make_client()
        result = await getattr(client, resource).list(limit=25, after="cur-1")
        assert result["pagination"] == {"count": 0, "next": None}
        params = route.calls.last.request.url.params
        assert params["limit"] == "25"
        assert params["after"] == "cur-1"

    @pytest.mark.parametrize("resource,path", LISTS)
    async def test_list_without_params(self, respx_mock, resource, path):
        route = respx_mock.get(f"{BASE_URL}{path}").respond(json=OK_LIST)
        client = make_client()
        await getattr(client, resource).list()
        assert route.calls.last.request.url.query == b""


class TestQueryMapping:
    """Keyword arguments are sent under their camelCase wire names."""

    async def test_financial_account_get_with_balance(self, respx_mock):
        route = respx_mock.get(f"{BASE_URL}/financial-accounts/fa-1").respond(
            json=OK
        )
        await make_client().financial_account.get("fa-1", with_balance=True)
        assert route.calls.last.request.url.params["withBalance"] == "true"

    async def test_financial_account_get_omits_unset(self, respx_mock):
        route = respx_mock.get(f"{BASE_URL}/financial-accounts/fa-1").respond(
            json=OK
        )
        await make_client().financial_account.get("fa-1")
        assert "withBalance" not in route.calls.last.request.url.params

    async def test_financial_transaction_filters(self, respx_mock):
        route = respx_mock.get(f"{BASE_URL}/financial-transactions").respond(
            json=OK_LIST
        )
        await make_client().financial_transaction.list(
            financial_account_id="fa-1", type="credit", reference="ref-1"
        )
        params = route.calls.last.request.url.params
        assert params["financialAccountId"] == "fa-1"
        assert params["type"] == "credit"
        assert params["reference"] == "ref-1"

    async def test_payment_filters(self, respx_mock):
        route = respx_mock.get(f"{BASE_URL}/payments").respond(json=OK_LIST)
        await make_client().payment.list(
            order_number="ORD-1", financial_transaction_reference="ftr-1"
        )
        params = route.calls.last.request.url.params
        assert params["orderNumber"] == "ORD-1"
        assert params["financialTransactionReference"] == "ftr-1"
        assert "financialAccountId" not in params

    async def test_payout_filters(self, respx_mock):
        route = respx_mock.get(f"{BASE_URL}/payouts").respond(json=OK_LIST)
        await make_client().payout.list(
            status="failed", source_financial_account_id="fa-1"
        )
        params = route.calls.last.request.url.params
        assert params["status"] == "failed"
        assert params["sourceFinancialAccountId"] == "fa-1"

    async def test_payment_code_filters(self, respx_mock):
        route = respx_mock.get(f"{BASE_URL}/payment-codes").respond(
            json=OK_LIST
        )
        await make_client().payment_code.list(
            status="active", mode="recurrent", ussd_code="*715*1#"
        )
        params = route.calls.last.request.url.params
        assert params["mode"] == "recurrent"
        assert params["ussdCode"] == "*715*1#"

    async def test_internal_transfer_filters(self, respx_mock):
        route = respx_mock.get(f"{BASE_URL}/internal-transfers").respond(
            json=OK_LIST
        )
        await make_client().internal_transfer.list(
            status="completed", destination_financial_account_id="fa-2"
        )
        params = route.calls.last.request.url.params
        assert params["status"] == "completed"
        assert params["destinationFinancialAccountId"] == "fa-2"

    @pytest.mark.parametrize("resource,path", [("bank", "/banks"), ("momo", "/momos")])
    async def test_provider_list_by_country(self, respx_mock, resource, path):
        route = respx_mock.get(f"{BASE_URL}{path}").respond(json=OK_LIST)
        await getattr(make_client(), resource).list(country="SL", limit=10)
        params = route.calls.last.request.url.params
        assert params["country"] == "SL"
        assert params["limit"] == "10"

    async def test_update_sends_nulls(self, respx_mock):
        route = respx_mock.patch(f"{BASE_URL}/payment-codes/pmc-1").respond(
            json=OK
        )
        await make_client().payment_code.update(
            "pmc-1", {"reference": None, "customer": None}
        )
        body = json.loads(route.calls.last.request.content)
        assert body == {"reference": None, "customer": None}


class TestResourceBehaviour:
    """Validation gating, options pass-through and path quoting."""

    async def test_validation_blocks_request(self, respx_mock):
        client = make_client()
        with pytest.raises(MonimeValidationError) as exc_info:
            await client.payout.create({"amount": {"currency": "SLE"}})
        assert exc_info.value.issues
        assert not respx_mock.calls

    async def test_invalid_limit_blocks_request(self, respx_mock):
        with pytest.raises(MonimeValidationError):
            await make_client().payout.list(limit=0)
        assert not respx_mock.calls

    async def test_invalid_country_blocks_request(self, respx_mock):
        with pytest.raises(MonimeValidationError):
            await make_client().bank.list(country="sierra leone")
        assert not respx_mock.calls

    async def test_validation_disabled(self, respx_mock):
        route = respx_mock.post(f"{BASE_URL}/payouts").respond(
            status_code=400,
            json={
                "success": False,
                "error": {
                    "code": 400,
                    "reason": "arguments_invalid",
                    "message": "amount is required",
                    "details": [],
                },
            },
        )
        client = make_client(validate_inputs=False)
        with pytest.raises(MonimeApiError) as exc_info:
            await client.payout.create({})
        assert exc_info.value.reason == "arguments_invalid"
        assert route.call_count == 1

    async def test_idempotency_key_option(self, respx_mock):
        route = respx_mock.post(f"{BASE_URL}/payouts").respond(json=OK)
        await make_client().payout.create(
            PAYOUT, RequestOptions(idempotency_key="payout-order-42")
        )
        headers = route.calls.last.request.headers
        assert headers["idempotency-key"] == "payout-order-42"

    async def test_receipt_redeem_with_key(self, respx_mock):
        route = respx_mock.post(
            f"{BASE_URL}/receipts/ORDER-12345/redeem"
        ).respond(json={"success": True, "result": {"redeem": True}})
        result = await make_client().receipt.redeem(
            "ORDER-12345",
            {"entitlements": [{"key": "ticket-general", "units": 2}]},
            RequestOptions(idempotency_key="unique-idempotency-key-001"),
        )
        assert result["result"] == {"redeem": True}
        headers = route.calls.last.request.headers
        assert headers["idempotency-key"] == "unique-idempotency-key-001"

    def test_path_segments_are_quoted(self):
        client = make_client()
        path = client.receipt._path("ORDER 1/2", "redeem")
        assert path == "/receipts/ORDER%201%2F2/redeem"

    def test_base_path(self):
        assert make_client().payout._path() == "/payouts"
