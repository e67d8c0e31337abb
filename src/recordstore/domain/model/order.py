"""Order aggregate.

An order records a single product purchase. The price is captured at
placement time, so later price changes on the product never reach it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from recordstore.domain.exceptions import ValidationError


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, raw: str) -> OrderStatus:
        """Look up a status by name, case-insensitively."""
        try:
            return cls(raw.strip().upper())
        except ValueError as exc:
            choices = ", ".join(s.value for s in cls)
            raise ValidationError(
                f"Unknown order status {raw!r} (expected one of {choices})"
            ) from exc

    @classmethod
    def coerce(cls, value: OrderStatus | str) -> OrderStatus:
        """Accept a status member or its name; reject anything else."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        raise ValidationError(
            f"Order status must be an OrderStatus, got {type(value).__name__}"
        )


@dataclass
class Order:
    """Aggregate root for purchase orders.

    ``total_price`` is fixed when the order is placed and never
    recalculated. Status transitions are unrestricted: any status may
    follow any other.
    """

    id: int
    user_id: int
    product_id: int
    quantity: int
    total_price: int  # locked at placement time
    status: OrderStatus = OrderStatus.PENDING
    order_date: datetime | None = None
    delivery_date: datetime | None = None

    @staticmethod
    def empty() -> Order:
        """The zero-valued record returned for a missing order."""
        return Order(id=0, user_id=0, product_id=0, quantity=0, total_price=0)

    @property
    def exists(self) -> bool:
        return self.id != 0

    def update_status(self, new_status: OrderStatus, now: datetime) -> None:
        """Set the status; moving to DELIVERED (re)stamps the delivery date."""
        self.status = new_status
        if new_status == OrderStatus.DELIVERED:
            self.delivery_date = now
