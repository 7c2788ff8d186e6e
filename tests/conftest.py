"""
Pytest configuration and fixtures for Mundipagg service tests.
"""

import os
import sys

import httpx
import pytest

# Add project root to Python path for imports
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(ROOT_DIR)

from mundipagg_service.adapters.mundipagg import MundipaggAdapter  # noqa: E402
from mundipagg_service.models import Address, CreditCard, TransactionOptions, Voucher  # noqa: E402


@pytest.fixture
def credit_card():
    return CreditCard(
        number="4000100011112224",
        name="Longbob Longsen",
        month=9,
        year=2030,
        verification_value="123",
    )


@pytest.fixture
def voucher():
    return Voucher(
        number="60607044137885",
        name="Longbob Longsen",
        month=9,
        year=2030,
        verification_value="123",
    )


@pytest.fixture
def billing_address():
    return Address(
        address1="456 My Street",
        address2="Apt 1",
        city="Ottawa",
        state="ON",
        country="CA",
        zip="K1C2N6",
        neighborhood="Centretown",
    )


@pytest.fixture
def options(billing_address):
    return TransactionOptions(
        email="longbob@example.com",
        billing_address=billing_address,
    )


@pytest.fixture
def charge_body():
    """Build Mundipagg charge documents as returned by the API."""

    def _body(status="paid", charge_id="ch_test123", **extra):
        body = {
            "id": charge_id,
            "code": "ORDER1",
            "amount": 1000,
            "status": status,
            "currency": "USD",
            "payment_method": "credit_card",
            "last_transaction": {
                "id": "tran_test123",
                "status": "captured" if status == "paid" else status,
                "acquirer_message": "Transação capturada com sucesso",
            },
        }
        body.update(extra)
        return body

    return _body


@pytest.fixture
def make_adapter():
    """Build a MundipaggAdapter whose HTTP traffic goes to canned responses.

    Returns ``(adapter, sent)`` where ``sent`` collects every ``httpx.Request``
    the adapter made, in order.
    """

    def _make(*responses: httpx.Response, **kwargs):
        queue = list(responses)
        sent = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            if not queue:
                raise AssertionError(f"Unexpected request: {request.method} {request.url}")
            return queue.pop(0)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        adapter = MundipaggAdapter(
            kwargs.pop("api_key", "sk_test_fake"),
            enable_test_mode=kwargs.pop("enable_test_mode", True),
            client=client,
            **kwargs,
        )
        return adapter, sent

    return _make
