"""Demo catalog covering every fulfillment rule.

Orders 1-11 hold one product each, one per rule branch. Order 12 is
empty. Order 13 mixes one in-stock product of each type. All dates are
relative to *now* so the outcomes stay the same whenever it is seeded.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from fulfillment.domain.model.product import Product, ProductType
from fulfillment.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from fulfillment.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def demo_products(now: datetime) -> list[Product]:
    def days(n: int) -> datetime:
        return now + timedelta(days=n)

    normal = ProductType.NORMAL
    seasonal = ProductType.SEASONAL
    expirable = ProductType.EXPIRABLE
    return [
        Product("1", "USB Cable", normal, available=10, lead_time_days=15),
        Product("2", "USB Dongle", normal, available=0, lead_time_days=10),
        Product("3", "Discontinued Adapter", normal, available=0, lead_time_days=0),
        Product("4", "Butter", expirable, 30, 15, expiry_date=days(26)),
        Product("5", "Milk", expirable, 6, 90, expiry_date=days(-2)),
        Product("6", "Yogurt", expirable, 0, 15, expiry_date=days(10)),
        Product("7", "Watermelon", seasonal, 30, 15,
                season_start_date=days(-2), season_end_date=days(58)),
        Product("8", "Cherries", seasonal, 0, 5,
                season_start_date=days(-10), season_end_date=days(30)),
        Product("9", "Strawberries", seasonal, 0, 60,
                season_start_date=days(-10), season_end_date=days(20)),
        Product("10", "Grapes", seasonal, 30, 15,
                season_start_date=days(180), season_end_date=days(240)),
        Product("11", "Pumpkin", seasonal, 10, 15,
                season_start_date=days(-60), season_end_date=days(-5)),
        Product("12", "HDMI Cable", normal, available=20, lead_time_days=15),
        Product("13", "Cheese", expirable, 15, 15, expiry_date=days(30)),
        Product("14", "Peaches", seasonal, 25, 10,
                season_start_date=days(-5), season_end_date=days(60)),
    ]


def demo_orders() -> list[tuple[int, list[str]]]:
    orders = [(n, [str(n)]) for n in range(1, 12)]
    orders.append((12, []))
    orders.append((13, ["12", "13", "14"]))
    return orders


def seed(
    product_repo: JsonProductRepository,
    order_repo: JsonOrderRepository,
    now: datetime,
) -> tuple[int, int]:
    """Replace all stored data with the demo catalog.

    Returns the number of products and orders written.
    """
    products = demo_products(now)
    orders = demo_orders()
    product_repo.replace_all(products)
    order_repo.replace_all(orders)
    return len(products), len(orders)
