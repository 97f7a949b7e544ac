"""Notification sink that records every notification as a log event.

Stands in for a real delivery channel (email, SMS). It never raises, so
the engine's fire-and-forget contract holds.
"""

from __future__ import annotations

from datetime import datetime

import structlog

from fulfillment.domain.notification_sink import NotificationSink

logger = structlog.get_logger(__name__)


class LoggingNotificationSink(NotificationSink):

    def send_delay_notification(self, lead_time_days: int, product_name: str) -> None:
        logger.info(
            "Notification sent",
            notification="delay",
            product_name=product_name,
            lead_time_days=lead_time_days,
        )

    def send_out_of_stock_notification(self, product_name: str) -> None:
        logger.info(
            "Notification sent",
            notification="out_of_stock",
            product_name=product_name,
        )

    def send_expiration_notification(
        self, product_name: str, expiry_date: datetime
    ) -> None:
        logger.info(
            "Notification sent",
            notification="expiration",
            product_name=product_name,
            expiry_date=expiry_date.isoformat(),
        )
