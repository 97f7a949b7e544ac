"""Notification port used by the fulfillment engine.

Notifications are fire-and-forget: the engine never reads a return
value and does not expect a sink to raise. Delivery guarantees are the
adapter's concern.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class NotificationSink(ABC):

    @abstractmethod
    def send_delay_notification(self, lead_time_days: int, product_name: str) -> None:
        """Tell customers a product will be restocked in *lead_time_days*."""

    @abstractmethod
    def send_out_of_stock_notification(self, product_name: str) -> None:
        """Tell customers a product cannot be supplied."""

    @abstractmethod
    def send_expiration_notification(
        self, product_name: str, expiry_date: datetime
    ) -> None:
        """Tell customers a product is expired or no longer available."""
