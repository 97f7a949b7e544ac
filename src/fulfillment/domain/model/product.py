"""Product aggregate.

A product carries its current fulfillment state: how many units are on
hand, how long a restock takes, and the dates that matter for its type.
Products are immutable; every state change returns the next state so the
repository always receives the record it is asked to store.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum

from fulfillment.domain.exceptions import ValidationError


class ProductType(Enum):
    NORMAL = "NORMAL"
    SEASONAL = "SEASONAL"
    EXPIRABLE = "EXPIRABLE"


@dataclass(frozen=True)
class Product:
    """A catalog item as seen by the fulfillment engine.

    Invariants:
    - ``available`` and ``lead_time_days`` are never negative
    - EXPIRABLE products always have an ``expiry_date``
    - SEASONAL products always have both season dates
    """

    id: str
    name: str
    type: ProductType
    available: int
    lead_time_days: int
    expiry_date: datetime | None = None
    season_start_date: datetime | None = None
    season_end_date: datetime | None = None

    def __post_init__(self) -> None:
        if self.available < 0:
            raise ValidationError(
                f"Available quantity for {self.name} cannot be negative, "
                f"got {self.available}"
            )
        if self.lead_time_days < 0:
            raise ValidationError(
                f"Lead time for {self.name} cannot be negative, "
                f"got {self.lead_time_days}"
            )
        if self.type == ProductType.EXPIRABLE and self.expiry_date is None:
            raise ValidationError(f"Expirable product {self.name} needs an expiry date")
        if self.type == ProductType.SEASONAL and (
            self.season_start_date is None or self.season_end_date is None
        ):
            raise ValidationError(
                f"Seasonal product {self.name} needs season start and end dates"
            )
        for label, value in (
            ("expiry date", self.expiry_date),
            ("season start date", self.season_start_date),
            ("season end date", self.season_end_date),
        ):
            if value is not None and value.tzinfo is None:
                raise ValidationError(
                    f"The {label} of {self.name} must carry a timezone, got {value.isoformat()}"
                )

    # --- Queries --------------------------------------------------------------

    @property
    def in_stock(self) -> bool:
        return self.available > 0

    def is_in_season(self, now: datetime) -> bool:
        """True when *now* falls strictly inside the season window."""
        return self.season_start_date < now < self.season_end_date

    def season_not_started(self, now: datetime) -> bool:
        return self.season_start_date > now

    def is_expired(self, now: datetime) -> bool:
        return not self.expiry_date > now

    def restock_date(self, now: datetime) -> datetime:
        """Date at which new stock would arrive if ordered at *now*."""
        return now + timedelta(days=self.lead_time_days)

    # --- Next-state builders --------------------------------------------------

    def decremented(self) -> Product:
        """Return this product with one unit taken out of stock."""
        if not self.in_stock:
            raise ValidationError(f"Cannot decrement stock of {self.name}: none available")
        return replace(self, available=self.available - 1)

    def out_of_stock(self) -> Product:
        return replace(self, available=0)

    def with_lead_time(self, days: int) -> Product:
        return replace(self, lead_time_days=days)
