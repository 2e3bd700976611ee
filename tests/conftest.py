"""
Pytest configuration and shared fixtures for testing.

This module provides reusable fixtures for:
- A fixed clock and a validator that uses it
- A fake acquiring bank served through httpx.MockTransport
- The payment store and payment service
- FastAPI app and async HTTP test client
"""

from collections.abc import AsyncGenerator
from datetime import datetime, timezone

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.bank.client import BankClient
from app.dependencies import get_payment_service
from app.schemas import PaymentRequest
from app.services.payments import PaymentService
from app.store import PaymentStore
from app.validation import PaymentValidator
from main import initialize_app

FIXED_NOW = datetime(2026, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


class FakeBank:
    """
    Stand-in for the acquiring bank.

    Records every request it receives. Tests tune the reply by setting
    status_code / body, or make the exchange fail with fail_with
    (an httpx exception class such as httpx.ReadTimeout).
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = {"authorized": True, "authorization_code": "ABC123"}
        self.fail_with = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with("bank exchange failed", request=request)
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def validator(fixed_now) -> PaymentValidator:
    """Validator whose idea of "now" is pinned to FIXED_NOW."""
    return PaymentValidator(clock=lambda: fixed_now)


@pytest.fixture
def make_payment_request():
    """Fixture to create a valid payment request with overrides."""

    def _make(**overrides) -> PaymentRequest:
        base = {
            "card_number": "1234567812345678",
            "expiry_month": 12,
            "expiry_year": 2099,
            "currency": "GBP",
            "amount": 100,
            "cvv": "123",
        }
        return PaymentRequest(**{**base, **overrides})

    return _make


@pytest.fixture
def fake_bank() -> FakeBank:
    return FakeBank()


@pytest.fixture
async def bank_client(fake_bank) -> AsyncGenerator[BankClient, None]:
    """Bank client wired to the fake bank; no network access."""
    client = BankClient(
        base_url="http://bank.test",
        timeout=1.0,
        transport=httpx.MockTransport(fake_bank),
    )

    yield client

    await client.close()


@pytest.fixture
def store() -> PaymentStore:
    return PaymentStore()


@pytest.fixture
def payment_service(validator, bank_client, store) -> PaymentService:
    return PaymentService(validator=validator, bank_client=bank_client, store=store)


@pytest.fixture
def app(payment_service):
    """
    Create a FastAPI application instance for testing.

    The lifespan does not run under ASGITransport, so the payment service
    dependency is overridden with the test service instead.
    """
    app_instance = initialize_app()
    app_instance.dependency_overrides[get_payment_service] = lambda: payment_service

    yield app_instance

    app_instance.dependency_overrides.clear()


@pytest.fixture
async def async_test_client(app) -> AsyncGenerator[AsyncClient, None]:
    """
    Create an async HTTP client for testing the API.

    Usage in tests:
        @pytest.mark.anyio
        async def test_endpoint(async_test_client: AsyncClient):
            response = await async_test_client.post("/api/payments", json={...})
            assert response.status_code == 200
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
