"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and only need to provide the primitive operations;
the stock convenience operations are built on top of ``update``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fulfillment.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Replace the stored record that has the product's ID.

        Raises PersistenceError when the record cannot be written.
        """

    def decrement_stock(self, product: Product) -> Product:
        """Persist *product* with one unit fewer available and return it."""
        updated = product.decremented()
        self.update(updated)
        return updated

    def set_out_of_stock(self, product: Product) -> Product:
        """Persist *product* with zero units available and return it."""
        updated = product.out_of_stock()
        self.update(updated)
        return updated
