"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from fulfillment.domain.exceptions import (
    DomainException,
    PersistenceError,
)
from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def update(self, product: Product) -> None:
        products = self._load()
        if product.id not in products:
            raise PersistenceError(f"Cannot update unknown product '{product.id}'")
        products[product.id] = product
        self._persist(products)

    def replace_all(self, products: list[Product]) -> None:
        """Overwrite the whole catalog (used by the seed command)."""
        self._persist({p.id: p for p in products})

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "type": product.type.value,
            "available": product.available,
            "lead_time_days": product.lead_time_days,
            "expiry_date": _format_date(product.expiry_date),
            "season_start_date": _format_date(product.season_start_date),
            "season_end_date": _format_date(product.season_end_date),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            type=ProductType(raw["type"]),
            available=raw["available"],
            lead_time_days=raw["lead_time_days"],
            expiry_date=_parse_date(raw.get("expiry_date")),
            season_start_date=_parse_date(raw.get("season_start_date")),
            season_end_date=_parse_date(raw.get("season_end_date")),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return {item["id"]: self._to_domain(item) for item in raw}
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc
        except (KeyError, TypeError, ValueError, DomainException) as exc:
            raise PersistenceError(
                f"Malformed product record in {self._file_path}: {exc}"
            ) from exc

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [self._to_raw(p) for p in products.values()]
        try:
            self._file_path.write_text(
                json.dumps(raw, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _format_date(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_date(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
