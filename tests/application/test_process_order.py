"""Integration tests for the ProcessOrder use case."""

from datetime import datetime, timedelta, timezone

import pytest

from fulfillment.application.dto import ProcessOrderResult
from fulfillment.application.process_order import ProcessOrderHandler
from fulfillment.domain.exceptions import (
    OrderNotFoundError,
    PersistenceError,
    UnsupportedTypeError,
)
from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.service.fulfillment_engine import FulfillmentEngine
from tests.fakes import (
    FakeOrderRepository,
    FakeProductRepository,
    RecordingNotificationSink,
)

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def _catalog() -> list[Product]:
    return [
        Product("12", "HDMI Cable", ProductType.NORMAL, available=20, lead_time_days=15),
        Product(
            "13", "Cheese", ProductType.EXPIRABLE, available=15, lead_time_days=15,
            expiry_date=NOW + timedelta(days=30),
        ),
        Product(
            "14", "Peaches", ProductType.SEASONAL, available=25, lead_time_days=10,
            season_start_date=NOW - timedelta(days=5),
            season_end_date=NOW + timedelta(days=60),
        ),
        Product("2", "USB Dongle", ProductType.NORMAL, available=0, lead_time_days=10),
    ]


def _setup(orders: dict[int, list[str]], products=None, **repo_kwargs):
    product_repo = FakeProductRepository(products or _catalog(), **repo_kwargs)
    order_repo = FakeOrderRepository(product_repo, orders)
    sink = RecordingNotificationSink()
    engine = FulfillmentEngine(product_repo, sink, clock=lambda: NOW)
    return ProcessOrderHandler(order_repo, engine), product_repo, sink


class TestProcessOrderHappyPath:

    def test_mixed_order_decrements_every_item(self):
        handler, product_repo, sink = _setup({13: ["12", "13", "14"]})

        result = handler.handle(13)

        assert result == ProcessOrderResult(order_id=13)
        assert product_repo.get_by_id("12").available == 19
        assert product_repo.get_by_id("13").available == 14
        assert product_repo.get_by_id("14").available == 24
        assert sink.sent == []

    def test_each_item_processed_once(self):
        handler, product_repo, sink = _setup({7: ["12", "2"]})

        handler.handle(7)

        assert [p.id for p in product_repo.writes] == ["12", "2"]
        assert sink.sent == [("delay", 10, "USB Dongle")]

    def test_empty_order_has_no_side_effects(self):
        handler, product_repo, sink = _setup({12: []})

        result = handler.handle(12)

        assert result.order_id == 12
        assert product_repo.writes == []
        assert sink.sent == []


class TestProcessOrderFailures:

    def test_unknown_order_rejected(self):
        handler, product_repo, sink = _setup({1: ["12"]})

        with pytest.raises(OrderNotFoundError, match="Order #999 not found"):
            handler.handle(999)

        assert product_repo.writes == []
        assert sink.sent == []

    def test_first_error_aborts_remaining_items(self):
        products = _catalog() + [
            Product("99", "Mystery Box", "BUNDLE", available=1, lead_time_days=0),
        ]
        handler, product_repo, _ = _setup({5: ["12", "99", "13"]}, products=products)

        with pytest.raises(UnsupportedTypeError):
            handler.handle(5)

        # Earlier item stays committed, later item is untouched.
        assert product_repo.get_by_id("12").available == 19
        assert product_repo.get_by_id("13").available == 15

    def test_persistence_error_surfaces(self):
        handler, product_repo, _ = _setup({3: ["12", "13"]}, failing_ids={"13"})

        with pytest.raises(PersistenceError):
            handler.handle(3)

        assert product_repo.get_by_id("12").available == 19
        assert product_repo.get_by_id("13").available == 15
