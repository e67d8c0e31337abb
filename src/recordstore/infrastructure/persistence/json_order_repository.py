"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from pathlib import Path

from recordstore.domain.model.order import Order, OrderStatus
from recordstore.domain.repository.order_repository import OrderRepository
from recordstore.infrastructure.persistence.json_file import (
    JsonTable,
    dump_datetime,
    load_datetime,
)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._table = JsonTable(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        raw = self._table.find("id", order_id)
        return self._to_domain(raw) if raw is not None else None

    def list_all(self) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._table.load()]
        return sorted(orders, key=lambda o: o.id)

    def save(self, order: Order) -> None:
        if order.id == 0:
            order.id = self._table.next_id()
        self._table.upsert("id", self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "product_id": order.product_id,
            "quantity": order.quantity,
            "total_price": order.total_price,
            "status": order.status.value,
            "order_date": dump_datetime(order.order_date),
            "delivery_date": dump_datetime(order.delivery_date),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            product_id=raw["product_id"],
            quantity=raw["quantity"],
            total_price=raw["total_price"],
            status=OrderStatus(raw["status"]),
            order_date=load_datetime(raw.get("order_date")),
            delivery_date=load_datetime(raw.get("delivery_date")),
        )
