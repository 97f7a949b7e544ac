"""Domain service: Fulfillment Engine.

Decides what happens to a single product when an order asks for it, and
carries that decision out. The decision depends only on the product's
current fields and the current time:

    NORMAL     in stock                      -> take one unit
               out of stock, lead time > 0   -> delay notice
               out of stock, no lead time    -> nothing
    SEASONAL   in season and in stock        -> take one unit
               otherwise                     -> see ``_handle_seasonal_shortage``
    EXPIRABLE  in stock and not expired      -> take one unit
               otherwise                     -> expiration notice, stock to zero

Every branch performs at most one repository write and sends at most one
notification.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

import structlog

from fulfillment.domain.exceptions import UnsupportedTypeError
from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.notification_sink import NotificationSink
from fulfillment.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FulfillmentEngine:

    def __init__(
        self,
        product_repo: ProductRepository,
        notifier: NotificationSink,
        clock: Clock | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._notifier = notifier
        self._clock = clock or utc_now

    def apply(self, product: Product) -> None:
        """Run the fulfillment rules for one product.

        Raises UnsupportedTypeError if the product type has no rule set.
        """
        logger.debug(
            "Processing product by type",
            product_id=product.id,
            type=getattr(product.type, "value", product.type),
            available=product.available,
        )
        if product.type == ProductType.NORMAL:
            self._apply_normal(product)
        elif product.type == ProductType.SEASONAL:
            self._apply_seasonal(product, self._clock())
        elif product.type == ProductType.EXPIRABLE:
            self._apply_expirable(product, self._clock())
        else:
            logger.error(
                "No handler found for product type",
                product_id=product.id,
                type=product.type,
            )
            raise UnsupportedTypeError(product.id, product.type)

    # --- Per-type rules -------------------------------------------------------

    def _apply_normal(self, product: Product) -> None:
        if product.in_stock:
            logger.debug("Decrementing stock for normal product", product_id=product.id)
            self._product_repo.decrement_stock(product)
            return
        if product.lead_time_days > 0:
            logger.debug(
                "Notifying delay for normal product",
                product_id=product.id,
                lead_time_days=product.lead_time_days,
            )
            self._notify_delay(product.lead_time_days, product)
            return
        logger.debug(
            "No action for normal product (out of stock, no lead time)",
            product_id=product.id,
        )

    def _apply_seasonal(self, product: Product, now: datetime) -> None:
        in_season = product.is_in_season(now)
        if in_season and product.in_stock:
            logger.debug(
                "Decrementing stock for seasonal product (in season)",
                product_id=product.id,
            )
            self._product_repo.decrement_stock(product)
            return
        logger.debug(
            "Handling out-of-season or unavailable seasonal product",
            product_id=product.id,
            in_season=in_season,
        )
        self._handle_seasonal_shortage(product, now)

    def _apply_expirable(self, product: Product, now: datetime) -> None:
        expired = product.is_expired(now)
        if product.in_stock and not expired:
            logger.debug("Decrementing stock for expirable product", product_id=product.id)
            self._product_repo.decrement_stock(product)
            return
        logger.debug(
            "Handling expired or unavailable product",
            product_id=product.id,
            expired=expired,
        )
        self._notifier.send_expiration_notification(product.name, product.expiry_date)
        self._product_repo.set_out_of_stock(product)

    # --- Shared helpers -------------------------------------------------------

    def _handle_seasonal_shortage(self, product: Product, now: datetime) -> None:
        """Decide between giving up on the season, waiting for it, or a delay."""
        if product.restock_date(now) > product.season_end_date:
            # Restock would land after the season closes.
            logger.debug("Seasonal restock misses season end", product_id=product.id)
            self._notifier.send_out_of_stock_notification(product.name)
            self._product_repo.set_out_of_stock(product)
            return
        if product.season_not_started(now):
            # Stock is kept for the season; the record is rewritten unchanged.
            logger.debug("Season not started", product_id=product.id)
            self._notifier.send_out_of_stock_notification(product.name)
            self._product_repo.update(product)
            return
        self._notify_delay(product.lead_time_days, product)

    def _notify_delay(self, lead_time_days: int, product: Product) -> None:
        updated = product.with_lead_time(lead_time_days)
        self._product_repo.update(updated)
        self._notifier.send_delay_notification(lead_time_days, updated.name)
