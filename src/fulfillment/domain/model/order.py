"""Order aggregate.

An order is a read-only view here: the engine only walks its line items.
The products are resolved by the repository through the order/product
association, so ``products`` holds the current state of every line item.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fulfillment.domain.model.product import Product


@dataclass(frozen=True)
class Order:
    """A purchase request together with its resolved line items.

    An order with no products is valid; processing it is a no-op.
    """

    id: int
    products: tuple[Product, ...] = field(default_factory=tuple)

    @property
    def product_ids(self) -> list[str]:
        return [p.id for p in self.products]
