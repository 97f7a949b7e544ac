"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fulfillment.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def find_order_with_products(self, order_id: int) -> Order | None:
        """Return an order with its line-item products, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order."""
