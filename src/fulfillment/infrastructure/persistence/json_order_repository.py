"""JSON-file-backed implementation of OrderRepository.

Orders only store the IDs of their line-item products; the products
themselves are resolved through the product repository at load time so
the engine always sees their current stock. A product appears at most
once per order.
"""

from __future__ import annotations

import json
from pathlib import Path

from fulfillment.domain.exceptions import PersistenceError
from fulfillment.domain.model.order import Order
from fulfillment.domain.repository.order_repository import OrderRepository
from fulfillment.domain.repository.product_repository import ProductRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path, product_repo: ProductRepository) -> None:
        self._file_path = file_path
        self._product_repo = product_repo
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def find_order_with_products(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def replace_all(self, orders: list[tuple[int, list[str]]]) -> None:
        """Overwrite every order with ``(order_id, product_ids)`` pairs."""
        records = [{"id": order_id, "product_ids": list(ids)} for order_id, ids in orders]
        for raw in records:
            self._check_record(raw)
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    def _to_domain(self, raw: dict) -> Order:
        products = []
        for product_id in raw["product_ids"]:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise PersistenceError(
                    f"Order #{raw['id']} references unknown product '{product_id}'"
                )
            products.append(product)
        return Order(id=raw["id"], products=tuple(products))

    @staticmethod
    def _check_record(raw: object) -> None:
        if not isinstance(raw, dict) or not isinstance(raw.get("id"), int):
            raise PersistenceError(f"Malformed order record: {raw!r}")
        product_ids = raw.get("product_ids")
        if not isinstance(product_ids, list) or not all(
            isinstance(pid, str) for pid in product_ids
        ):
            raise PersistenceError(
                f"Malformed order record #{raw['id']}: product_ids must be a list of IDs"
            )
        duplicates = sorted({pid for pid in product_ids if product_ids.count(pid) > 1})
        if duplicates:
            raise PersistenceError(
                f"Order #{raw['id']} lists product(s) {', '.join(duplicates)} more than once"
            )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc
        if not isinstance(records, list):
            raise PersistenceError(f"Malformed order file {self._file_path}: expected a list")
        for raw in records:
            self._check_record(raw)
        return records

    def _persist_raw(self, orders: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(orders, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
