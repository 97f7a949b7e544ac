"""Application service: Process Order use case.

Loads an order with its line items and runs the fulfillment engine on
each product in turn. Items are independent units of work: if one fails,
the error propagates and later items are left untouched, while earlier
items keep whatever the engine already persisted for them.
"""

from __future__ import annotations

import structlog
from structlog.contextvars import bound_contextvars

from fulfillment.application.dto import ProcessOrderResult
from fulfillment.domain.exceptions import OrderNotFoundError
from fulfillment.domain.repository.order_repository import OrderRepository
from fulfillment.domain.service.fulfillment_engine import FulfillmentEngine

logger = structlog.get_logger(__name__)


class ProcessOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        engine: FulfillmentEngine,
    ) -> None:
        self._order_repo = order_repo
        self._engine = engine

    def handle(self, order_id: int) -> ProcessOrderResult:
        with bound_contextvars(order_id=order_id):
            logger.info("Fetching order with products")
            order = self._order_repo.find_order_with_products(order_id)
            if order is None:
                logger.warning("Order not found")
                raise OrderNotFoundError(order_id)

            logger.info("Processing products for order", product_count=len(order.products))
            for product in order.products:
                logger.debug(
                    "Processing product",
                    product_id=product.id,
                    product_name=product.name,
                )
                self._engine.apply(product)

            logger.info("Order processing completed")
            return ProcessOrderResult(order_id=order.id)
