"""Integration tests for the UpdateOrderStatus operation."""

import pytest

from recordstore.application.record_store import RecordStore
from recordstore.domain.events import OrderStatusUpdated
from recordstore.domain.exceptions import EntityNotFoundError, ValidationError
from recordstore.domain.model.order import OrderStatus
from tests.fakes import EventRecorder, FakeClock, snapshot


def _setup():
    store = RecordStore(clock=FakeClock())
    recorder = EventRecorder()
    store.subscribe(OrderStatusUpdated, recorder)
    user_id = store.create_user("Alice", "alice@example.com", "w")
    product_id = store.add_product("Widget", "", 100, 10, "owner")
    order_id = store.place_order(user_id, product_id, 1)
    return store, recorder, order_id


class TestUpdateOrderStatus:

    def test_sets_status(self):
        store, _, order_id = _setup()
        store.update_order_status(order_id, OrderStatus.CONFIRMED)
        assert store.get_order_status(order_id) == OrderStatus.CONFIRMED

    def test_delivered_stamps_delivery_date(self):
        store, _, order_id = _setup()
        store.update_order_status(order_id, OrderStatus.DELIVERED)
        order = store.get_order(order_id)
        assert order.delivery_date is not None
        assert order.delivery_date > order.order_date

    def test_delivered_twice_restamps_later(self):
        store, _, order_id = _setup()
        store.update_order_status(order_id, OrderStatus.DELIVERED)
        first = store.get_order(order_id).delivery_date
        store.update_order_status(order_id, OrderStatus.DELIVERED)
        second = store.get_order(order_id).delivery_date
        assert second > first

    def test_no_transition_graph_enforced(self):
        store, _, order_id = _setup()
        for status in [
            OrderStatus.DELIVERED,
            OrderStatus.PENDING,
            OrderStatus.CANCELLED,
            OrderStatus.SHIPPED,
        ]:
            store.update_order_status(order_id, status)
            assert store.get_order_status(order_id) == status

    def test_emits_event_per_call(self):
        store, recorder, order_id = _setup()
        store.update_order_status(order_id, OrderStatus.SHIPPED)
        store.update_order_status(order_id, OrderStatus.SHIPPED)
        assert recorder.events == [
            OrderStatusUpdated(order_id=order_id, new_status=OrderStatus.SHIPPED),
            OrderStatusUpdated(order_id=order_id, new_status=OrderStatus.SHIPPED),
        ]

    def test_unknown_order_not_found(self):
        store, recorder, _ = _setup()
        before = snapshot(store)
        with pytest.raises(EntityNotFoundError, match="Order #42 not found"):
            store.update_order_status(42, OrderStatus.DELIVERED)
        assert snapshot(store) == before
        assert recorder.events == []

    def test_missing_order_status_reads_as_default(self):
        store, _, _ = _setup()
        assert store.get_order(42).id == 0
        assert store.get_order_status(42) == OrderStatus.PENDING


class TestStatusValidation:

    def test_status_name_is_accepted(self):
        store, recorder, order_id = _setup()
        store.update_order_status(order_id, "delivered")
        order = store.get_order(order_id)
        assert order.status == OrderStatus.DELIVERED
        assert order.delivery_date is not None
        assert recorder.events == [
            OrderStatusUpdated(order_id=order_id, new_status=OrderStatus.DELIVERED)
        ]

    @pytest.mark.parametrize("bad_status", ["LOST", 3, None])
    def test_bad_status_rejected_before_any_write(self, bad_status):
        store, recorder, order_id = _setup()
        before = snapshot(store)
        with pytest.raises(ValidationError):
            store.update_order_status(order_id, bad_status)
        assert snapshot(store) == before
        assert store.get_order_status(order_id) == OrderStatus.PENDING
        assert recorder.events == []

    def test_bad_status_checked_before_order_lookup(self):
        store, _, _ = _setup()
        with pytest.raises(ValidationError):
            store.update_order_status(42, "LOST")
