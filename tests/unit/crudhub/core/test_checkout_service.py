"""Tests for checkout and the payment provider clients."""

import threading
from urllib.parse import parse_qs

import httpx
import pytest
from sqlmodel import select

from src.crudhub.core.errors import NotFound, UpstreamError, ValidationError
from src.crudhub.core.services import CheckoutService, LocalPaymentProvider
from src.crudhub.core.services.checkout.payment_provider import encode_line_items
from src.crudhub.entities.service.order import CheckoutRequest, LineItem, OrderTable


def _request(*items: dict) -> CheckoutRequest:
    return CheckoutRequest.model_validate({"items": list(items)})


class TestLineItemValidation:
    def test_empty_cart(self):
        with pytest.raises(ValidationError) as exc_info:
            CheckoutService.to_line_items(_request())
        assert exc_info.value.details["fields"] == ["items"]

    def test_missing_price(self):
        with pytest.raises(ValidationError) as exc_info:
            CheckoutService.to_line_items(_request({"name": "Mug"}))
        assert exc_info.value.details["fields"] == ["items[0].price"]

    def test_zero_quantity(self):
        with pytest.raises(ValidationError):
            CheckoutService.to_line_items(_request({"name": "Mug", "price": 3, "quantity": 0}))

    @pytest.mark.parametrize("price", [float("inf"), float("nan")])
    def test_non_finite_price(self, price):
        with pytest.raises(ValidationError) as exc_info:
            CheckoutService.to_line_items(_request({"name": "Mug", "price": price}))
        assert exc_info.value.details == {"fields": ["items[0].price"]}

    def test_quantity_defaults_to_one(self):
        (item,) = CheckoutService.to_line_items(_request({"name": "Mug", "price": 3}))
        assert item.quantity == 1


class TestEncodeLineItems:
    def test_amounts_in_minor_units(self):
        form = encode_line_items(
            [LineItem(name="Mug", price=12.34, quantity=2)], currency="usd"
        )
        assert form == {
            "line_items[0][price_data][currency]": "usd",
            "line_items[0][price_data][product_data][name]": "Mug",
            "line_items[0][price_data][unit_amount]": "1234",
            "line_items[0][quantity]": "2",
        }


class TestCheckout:
    async def test_local_provider_records_an_order(self, session):
        service = CheckoutService(session, LocalPaymentProvider())

        order = await service.checkout(
            _request({"name": "Mug", "price": 12.5, "quantity": 2, "product_id": "p-1"})
        )

        assert order.session_id.startswith("cs_local_")
        assert order.total == 25.0
        stored = service.get_order(order.id)
        assert stored.items == order.items
        assert stored.status.value == "pending"

    async def test_order_is_recorded_in_a_worker_thread(self, session, monkeypatch):
        loop_thread = threading.get_ident()
        record_threads = []
        record_order = CheckoutService._record_order

        def tracking_record_order(self, items, session_id):
            record_threads.append(threading.get_ident())
            return record_order(self, items, session_id)

        monkeypatch.setattr(CheckoutService, "_record_order", tracking_record_order)
        service = CheckoutService(session, LocalPaymentProvider())

        order = await service.checkout(_request({"name": "Mug", "price": 3}))

        assert len(record_threads) == 1
        assert record_threads[0] != loop_thread
        assert service.get_order(order.id).session_id == order.session_id

    async def test_http_provider_receives_cart_and_redirects(
        self, session, payment_provider_factory
    ):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers["Authorization"]
            seen["form"] = parse_qs(request.content.decode())
            return httpx.Response(200, json={"id": "cs_test_123"})

        service = CheckoutService(session, payment_provider_factory(handler))
        order = await service.checkout(_request({"name": "Mug", "price": 5, "quantity": 1}))

        assert order.session_id == "cs_test_123"
        assert seen["auth"] == "Bearer sk_test"
        assert seen["form"]["success_url"] == ["http://localhost:3000/success"]
        assert seen["form"]["cancel_url"] == ["http://localhost:3000/cancel"]
        assert seen["form"]["line_items[0][price_data][unit_amount]"] == ["500"]

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(500, json={"error": "boom"}),
            httpx.Response(200, json={"object": "checkout.session"}),
            httpx.Response(200, content=b"not json"),
        ],
    )
    async def test_provider_failures_are_upstream_errors(
        self, session, payment_provider_factory, response
    ):
        service = CheckoutService(session, payment_provider_factory(lambda _: response))

        with pytest.raises(UpstreamError):
            await service.checkout(_request({"name": "Mug", "price": 5}))

        assert session.exec(select(OrderTable)).all() == []

    async def test_unreachable_provider(self, session, payment_provider_factory):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        service = CheckoutService(session, payment_provider_factory(handler))
        with pytest.raises(UpstreamError):
            await service.checkout(_request({"name": "Mug", "price": 5}))

    def test_unknown_order(self, session):
        with pytest.raises(NotFound):
            CheckoutService(session, LocalPaymentProvider()).get_order("missing")
