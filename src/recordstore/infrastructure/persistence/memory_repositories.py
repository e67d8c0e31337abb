"""In-memory repositories.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. Records are copied on the way in and on
the way out, so nothing outside the repository can alter stored state
without going through ``save``.
"""

from __future__ import annotations

from copy import deepcopy

from recordstore.domain.model.order import Order
from recordstore.domain.model.product import Product
from recordstore.domain.model.profile import UserProfile
from recordstore.domain.model.user import User
from recordstore.domain.repository.order_repository import OrderRepository
from recordstore.domain.repository.product_repository import ProductRepository
from recordstore.domain.repository.profile_repository import ProfileRepository
from recordstore.domain.repository.user_repository import UserRepository


class _IdCounter:
    """Monotonic ID source. ID 0 is never handed out."""

    def __init__(self) -> None:
        self._last = 0

    def next(self) -> int:
        self._last += 1
        return self._last


class InMemoryUserRepository(UserRepository):

    def __init__(self) -> None:
        self._store: dict[int, User] = {}
        self._ids = _IdCounter()

    def get_by_id(self, user_id: int) -> User | None:
        user = self._store.get(user_id)
        return deepcopy(user) if user is not None else None

    def list_all(self) -> list[User]:
        return [deepcopy(self._store[k]) for k in sorted(self._store)]

    def save(self, user: User) -> None:
        if user.id == 0:
            user.id = self._ids.next()
        self._store[user.id] = deepcopy(user)


class InMemoryProductRepository(ProductRepository):

    def __init__(self) -> None:
        self._store: dict[int, Product] = {}
        self._ids = _IdCounter()

    def get_by_id(self, product_id: int) -> Product | None:
        product = self._store.get(product_id)
        return deepcopy(product) if product is not None else None

    def list_all(self) -> list[Product]:
        return [deepcopy(self._store[k]) for k in sorted(self._store)]

    def save(self, product: Product) -> None:
        if product.id == 0:
            product.id = self._ids.next()
        self._store[product.id] = deepcopy(product)


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._ids = _IdCounter()

    def get_by_id(self, order_id: int) -> Order | None:
        order = self._store.get(order_id)
        return deepcopy(order) if order is not None else None

    def list_all(self) -> list[Order]:
        return [deepcopy(self._store[k]) for k in sorted(self._store)]

    def save(self, order: Order) -> None:
        if order.id == 0:
            order.id = self._ids.next()
        self._store[order.id] = deepcopy(order)


class InMemoryProfileRepository(ProfileRepository):

    def __init__(self) -> None:
        self._store: dict[int, UserProfile] = {}

    def get_by_user_id(self, user_id: int) -> UserProfile | None:
        profile = self._store.get(user_id)
        return deepcopy(profile) if profile is not None else None

    def save(self, profile: UserProfile) -> None:
        self._store[profile.user_id] = deepcopy(profile)
