"""Tests for the JSON-file-backed repositories, using pytest's tmp_path."""

import json
from datetime import datetime, timezone

from recordstore.domain.model.order import Order, OrderStatus
from recordstore.domain.model.product import Product
from recordstore.domain.model.profile import UserProfile
from recordstore.domain.model.user import User
from recordstore.domain.model.value_objects import Address
from recordstore.infrastructure.bootstrap import record_store
from recordstore.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from recordstore.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from recordstore.infrastructure.persistence.json_profile_repository import (
    JsonProfileRepository,
)
from recordstore.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)

WHEN = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


class TestJsonUserRepository:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "nested" / "users.json"
        JsonUserRepository(path)
        assert json.loads(path.read_text()) == []

    def test_save_assigns_ids_and_round_trips(self, tmp_path):
        repo = JsonUserRepository(tmp_path / "users.json")
        alice = User(id=0, name="Alice", email="a@example.com", wallet="w1", registration_date=WHEN)
        bob = User(id=0, name="Bob", email="b@example.com", wallet="w2", registration_date=WHEN)
        repo.save(alice)
        repo.save(bob)

        assert (alice.id, bob.id) == (1, 2)
        assert repo.get_by_id(1) == alice
        assert [u.name for u in repo.list_all()] == ["Alice", "Bob"]
        assert repo.get_by_id(3) is None


class TestJsonProductRepository:

    def test_update_replaces_record(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        product = Product(id=0, name="Widget", description="", price=100, stock=2, owner="o")
        repo.save(product)
        product.set_stock(0)
        repo.save(product)

        stored = repo.get_by_id(product.id)
        assert len(repo.list_all()) == 1
        assert stored.stock == 0
        assert stored.is_available is False

    def test_availability_is_not_persisted(self, tmp_path):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)
        repo.save(Product(id=0, name="Widget", description="", price=1, stock=3, owner="o"))
        assert "is_available" not in json.loads(path.read_text())[0]
        assert repo.get_by_id(1).is_available is True


class TestJsonOrderRepository:

    def test_round_trips_status_and_dates(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = Order(id=0, user_id=1, product_id=2, quantity=3, total_price=300, order_date=WHEN)
        repo.save(order)
        order.update_status(OrderStatus.DELIVERED, now=WHEN)
        repo.save(order)

        stored = repo.get_by_id(order.id)
        assert stored.status == OrderStatus.DELIVERED
        assert stored.order_date == WHEN
        assert stored.delivery_date == WHEN

    def test_undelivered_order_keeps_none(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        repo.save(Order(id=0, user_id=1, product_id=2, quantity=1, total_price=5, order_date=WHEN))
        assert repo.get_by_id(1).delivery_date is None


class TestJsonProfileRepository:

    def test_profile_keeps_user_snapshot(self, tmp_path):
        repo = JsonProfileRepository(tmp_path / "profiles.json")
        user = User(id=4, name="Alice", email="a@example.com", wallet="w", registration_date=WHEN)
        profile = UserProfile.create(user, Address("1 Main St", "Springfield", "IL", "62701", "US"))
        repo.save(profile)

        stored = repo.get_by_user_id(4)
        assert stored == profile
        assert repo.get_by_user_id(5) is None

    def test_save_overwrites_by_user(self, tmp_path):
        path = tmp_path / "profiles.json"
        repo = JsonProfileRepository(path)
        user = User(id=4, name="Alice", email="a@example.com", wallet="w", registration_date=WHEN)
        first = UserProfile.create(user, Address(city="Paris"))
        first.total_orders = 3
        repo.save(first)
        repo.save(UserProfile.create(user, Address(city="Lyon")))

        assert len(json.loads(path.read_text())) == 1
        assert repo.get_by_user_id(4).address.city == "Lyon"
        assert repo.get_by_user_id(4).total_orders == 0


class TestJsonBackedStore:

    def test_state_survives_a_new_store_instance(self, tmp_path):
        store = record_store(tmp_path)
        user_id = store.create_user("Alice", "a@example.com", "w")
        store.create_user_profile(user_id, "", "Paris", "", "", "FR")
        product_id = store.add_product("Widget", "", 100, 2, "o")
        store.place_order(user_id, product_id, 2)

        reopened = record_store(tmp_path)
        assert reopened.get_product_availability(product_id) is False
        assert reopened.get_loyalty_points(user_id) == 20
        assert reopened.create_user("Bob", "b@example.com", "w2") == user_id + 1

    def test_data_dir_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RECORDSTORE_DATA_DIR", str(tmp_path / "env"))
        store = record_store()
        store.create_user("Alice", "a@example.com", "w")
        assert (tmp_path / "env" / "users.json").exists()
