"""
Shared test fixtures and utilities.

Provides settings, an in-memory transport, and sample API payloads used
across the test modules.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional

import pytest

from stripe_bindings.checkout.service import reset_checkout_session_service
from stripe_bindings.client import APIRequestor, TransportResponse
from stripe_bindings.shared.config import Settings, get_settings


TEST_API_KEY = "sk_test_123"
TEST_API_BASE = "https://api.example.test"


@dataclass
class RecordedRequest:
    method: str
    url: str
    headers: dict[str, str]
    body: Optional[bytes]


class FakeTransport:
    """In-memory transport that replays queued responses."""

    def __init__(self):
        self.requests: list[RecordedRequest] = []
        self._responses: list[TransportResponse] = []

    def queue(
        self,
        status_code: int,
        payload: Any,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        """
        Queue a response for the next request.

        Args:
            status_code: HTTP status to return
            payload: bytes are returned verbatim, anything else is JSON-encoded
            headers: Response headers
        """
        body = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
        self._responses.append(TransportResponse(status_code, body, headers or {}))

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: Optional[bytes] = None,
    ) -> TransportResponse:
        self.requests.append(RecordedRequest(method, url, headers, body))
        return self._responses.pop(0)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings and the service singleton around each test."""
    get_settings.cache_clear()
    reset_checkout_session_service()
    yield
    get_settings.cache_clear()
    reset_checkout_session_service()


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a fake API host."""
    return Settings(
        api_key=TEST_API_KEY,
        api_base=TEST_API_BASE,
        api_version="2019-03-14",
    )


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def requestor(fake_transport: FakeTransport, settings: Settings) -> APIRequestor:
    return APIRequestor(fake_transport, settings=settings)


@pytest.fixture
def customer_payload() -> dict[str, Any]:
    return {
        "id": "cus_123",
        "object": "customer",
        "email": "jenny@example.com",
        "livemode": False,
        "metadata": {"plan": "gold"},
        "created": 1554000000,
    }


@pytest.fixture
def payment_intent_payload() -> dict[str, Any]:
    return {
        "id": "pi_123",
        "object": "payment_intent",
        "amount": 1000,
        "currency": "usd",
        "capture_method": "automatic",
        "customer": "cus_123",
        "livemode": False,
        "payment_method_types": ["card"],
        "status": "requires_payment_method",
    }


@pytest.fixture
def session_payload() -> dict[str, Any]:
    """A checkout session with unexpanded references."""
    return {
        "id": "cs_test_123",
        "object": "checkout.session",
        "cancel_url": "https://example.com/cancel",
        "client_reference_id": "order_42",
        "customer": "cus_123",
        "customer_email": None,
        "display_items": [
            {
                "amount": 1500,
                "currency": "usd",
                "custom": {
                    "description": "Comfortable cotton t-shirt",
                    "images": ["https://example.com/t-shirt.png"],
                    "name": "T-shirt",
                },
                "quantity": 2,
                "type": "custom",
            }
        ],
        "livemode": False,
        "locale": None,
        "payment_intent": "pi_123",
        "payment_method_types": ["card"],
        "subscription": None,
        "submit_type": "pay",
        "success_url": "https://example.com/success",
    }
