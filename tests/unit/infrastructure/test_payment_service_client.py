"""Tests for PaymentServiceClient retry classification and wire format."""

import asyncio
import json
from decimal import Decimal
from uuid import uuid4

import aiohttp
import pytest

from orderhub.application.dtos.payment_dto import CreatePaymentRequest
from orderhub.application.services.snapshot_builder import OrderSnapshotBuilder
from orderhub.domain.exceptions import GatewayAuthenticationError, GatewayError
from orderhub.infrastructure.adapters.payment import PaymentServiceClient
from orderhub.settings.payment_settings import PaymentServiceSettings


PAYMENT_ID = "3fa85f64-5717-4562-b3fc-2c963f66afa6"
SUCCESS_BODY = json.dumps(
    {"paymentId": PAYMENT_ID, "status": "Pending", "createdAt": "2026-10-19T12:00:00Z"}
)


class FakeResponse:
    def __init__(self, status: int, body: str = "") -> None:
        self.status = status
        self._body = body

    async def text(self) -> str:
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Plays back scripted outcomes: a (status, body) tuple or an exception."""

    def __init__(self, *outcomes) -> None:
        self.outcomes = list(outcomes)
        self.calls = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return FakeResponse(*outcome)


class RecordingSleep:
    def __init__(self) -> None:
        self.delays = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def make_settings(**overrides) -> PaymentServiceSettings:
    values = {"base_url": "http://gateway.local/", "retry_enabled": True, "retry_count": 3}
    values.update(overrides)
    return PaymentServiceSettings(**values)


@pytest.fixture
def payment_request(make_order, make_item):
    order = make_order(items=[make_item(base_price="5.00", ingredients=[("Egg", "1.00", 3)])])
    return CreatePaymentRequest(
        order_id=order.id,
        total_amount=order.total_price,
        order_snapshot=OrderSnapshotBuilder().build(order),
    )


@pytest.mark.asyncio
async def test_success_posts_string_encoded_snapshot(payment_request):
    session = FakeSession((201, SUCCESS_BODY))
    client = PaymentServiceClient(make_settings(), session=session, sleep=RecordingSleep())

    response = await client.create_payment(payment_request, "token-123")

    assert str(response.payment_id) == PAYMENT_ID
    assert response.status == "Pending"
    call = session.calls[0]
    assert call["url"] == "http://gateway.local/payment/create"
    assert call["headers"] == {"Authorization": "Bearer token-123"}
    body = call["json"]
    assert set(body) == {"orderId", "totalAmount", "orderSnapshot"}
    assert body["orderId"] == str(payment_request.order_id)
    assert body["totalAmount"] == 8.0
    assert isinstance(body["orderSnapshot"], str)
    snapshot = json.loads(body["orderSnapshot"])
    assert set(snapshot) == {"order", "pricing", "items", "version"}
    assert snapshot["version"] == 1
    assert snapshot["pricing"] == {"totalPrice": 8.0, "currency": "BRL"}
    assert snapshot["items"][0]["customIngredients"] == [{"name": "Egg", "price": 1.0, "quantity": 3}]


@pytest.mark.asyncio
async def test_retries_5xx_then_succeeds(payment_request):
    session = FakeSession((500, "boom"), (503, "busy"), (200, SUCCESS_BODY))
    sleep = RecordingSleep()
    client = PaymentServiceClient(make_settings(), session=session, sleep=sleep)

    response = await client.create_payment(payment_request, "t")

    assert str(response.payment_id) == PAYMENT_ID
    assert len(session.calls) == 3
    assert sleep.delays == [1.0, 1.0]


@pytest.mark.asyncio
async def test_retry_disabled_means_single_attempt(payment_request):
    session = FakeSession((500, "boom"))
    client = PaymentServiceClient(
        make_settings(retry_enabled=False, retry_count=5), session=session, sleep=RecordingSleep()
    )

    with pytest.raises(GatewayError) as exc_info:
        await client.create_payment(payment_request, "t")

    assert exc_info.value.status_code == 500
    assert len(session.calls) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [400, 403, 404, 409])
async def test_client_errors_are_terminal(payment_request, status):
    session = FakeSession((status, "nope"), (200, SUCCESS_BODY))
    sleep = RecordingSleep()
    client = PaymentServiceClient(make_settings(), session=session, sleep=sleep)

    with pytest.raises(GatewayError) as exc_info:
        await client.create_payment(payment_request, "t")

    assert exc_info.value.status_code == status
    assert not isinstance(exc_info.value, GatewayAuthenticationError)
    assert len(session.calls) == 1
    assert sleep.delays == []


@pytest.mark.asyncio
async def test_unauthorized_is_terminal_with_distinct_error(payment_request):
    session = FakeSession((401, ""), (200, SUCCESS_BODY))
    client = PaymentServiceClient(make_settings(), session=session, sleep=RecordingSleep())

    with pytest.raises(GatewayAuthenticationError) as exc_info:
        await client.create_payment(payment_request, "expired")

    assert exc_info.value.status_code == 401
    assert "invalid or expired" in str(exc_info.value)
    assert len(session.calls) == 1


@pytest.mark.asyncio
async def test_timeout_exhaustion_maps_to_408(payment_request):
    session = FakeSession(asyncio.TimeoutError(), asyncio.TimeoutError(), asyncio.TimeoutError())
    sleep = RecordingSleep()
    client = PaymentServiceClient(make_settings(), session=session, sleep=sleep)

    with pytest.raises(GatewayError) as exc_info:
        await client.create_payment(payment_request, "t")

    assert exc_info.value.status_code == 408
    assert len(session.calls) == 3
    assert len(sleep.delays) == 2


@pytest.mark.asyncio
async def test_transport_error_is_retried(payment_request):
    session = FakeSession(aiohttp.ClientConnectionError("refused"), (200, SUCCESS_BODY))
    client = PaymentServiceClient(make_settings(), session=session, sleep=RecordingSleep())

    response = await client.create_payment(payment_request, "t")

    assert str(response.payment_id) == PAYMENT_ID
    assert len(session.calls) == 2


@pytest.mark.asyncio
async def test_empty_success_body_is_terminal(payment_request):
    session = FakeSession((200, ""), (200, SUCCESS_BODY))
    client = PaymentServiceClient(make_settings(), session=session, sleep=RecordingSleep())

    with pytest.raises(GatewayError):
        await client.create_payment(payment_request, "t")

    assert len(session.calls) == 1


@pytest.mark.asyncio
async def test_cancellation_propagates_without_retry(payment_request):
    session = FakeSession(asyncio.CancelledError(), (200, SUCCESS_BODY))
    client = PaymentServiceClient(make_settings(), session=session, sleep=RecordingSleep())

    with pytest.raises(asyncio.CancelledError):
        await client.create_payment(payment_request, "t")

    assert len(session.calls) == 1


def test_snapshot_payload_excludes_customer_data(make_order, make_item):
    order = make_order(items=[make_item()], customer_id=uuid4())
    request = CreatePaymentRequest(
        order_id=order.id,
        total_amount=Decimal("10.00"),
        order_snapshot=OrderSnapshotBuilder().build(order),
    )

    encoded = request.to_gateway_payload()["orderSnapshot"]

    assert str(order.customer_id) not in encoded
    assert "customer" not in encoded.lower()
