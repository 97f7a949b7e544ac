"""Wiring of the JSON repositories, notification sink and engine.

The CLI asks this module for ready-made collaborators; nothing else in
the package builds concrete adapters.
"""

from __future__ import annotations

from fulfillment.application.process_order import ProcessOrderHandler
from fulfillment.domain.service.fulfillment_engine import FulfillmentEngine
from fulfillment.infrastructure.config import get_settings
from fulfillment.infrastructure.notifications.logging_notification_sink import (
    LoggingNotificationSink,
)
from fulfillment.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from fulfillment.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(get_settings().products_file)


def order_repository(
    product_repo: JsonProductRepository | None = None,
) -> JsonOrderRepository:
    return JsonOrderRepository(
        get_settings().orders_file, product_repo or product_repository()
    )


def notification_sink() -> LoggingNotificationSink:
    return LoggingNotificationSink()


def process_order_handler() -> ProcessOrderHandler:
    products = product_repository()
    engine = FulfillmentEngine(product_repo=products, notifier=notification_sink())
    return ProcessOrderHandler(order_repo=order_repository(products), engine=engine)
