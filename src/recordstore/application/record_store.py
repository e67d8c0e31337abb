"""Application service: the record store.

This is the only place that coordinates multiple aggregates. Every
operation runs under the store's lock and follows a two-phase shape:

  Phase 1, load and validate: look up every referenced record and check
           every precondition. Fails fast before any mutation.
  Phase 2, mutate and persist: apply the changes to the aggregates,
           save them, then publish the event for the operation.

Read operations never raise. A missing ID yields the zero-valued record
(``id == 0``), which is how callers detect absence.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Iterator

from recordstore.domain.events import (
    DomainEvent,
    EventBus,
    OrderPlaced,
    OrderStatusUpdated,
    ProductAdded,
    UserCreated,
)
from recordstore.domain.exceptions import DomainException, EntityNotFoundError
from recordstore.domain.model.order import Order, OrderStatus
from recordstore.domain.model.product import Product
from recordstore.domain.model.profile import UserProfile
from recordstore.domain.model.user import User
from recordstore.domain.model.value_objects import Address, Quantity
from recordstore.domain.repository.order_repository import OrderRepository
from recordstore.domain.repository.product_repository import ProductRepository
from recordstore.domain.repository.profile_repository import ProfileRepository
from recordstore.domain.repository.user_repository import UserRepository
from recordstore.infrastructure.persistence.memory_repositories import (
    InMemoryOrderRepository,
    InMemoryProductRepository,
    InMemoryProfileRepository,
    InMemoryUserRepository,
)

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RecordStore:
    """Owns the user, product, order and profile tables.

    Repositories default to in-memory ones. Pass JSON repositories (see
    ``recordstore.infrastructure.bootstrap``) to keep state on disk.
    """

    def __init__(
        self,
        user_repo: UserRepository | None = None,
        product_repo: ProductRepository | None = None,
        order_repo: OrderRepository | None = None,
        profile_repo: ProfileRepository | None = None,
        event_bus: EventBus | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._users = user_repo or InMemoryUserRepository()
        self._products = product_repo or InMemoryProductRepository()
        self._orders = order_repo or InMemoryOrderRepository()
        self._profiles = profile_repo or InMemoryProfileRepository()
        self._events = event_bus or EventBus()
        self._clock = clock
        self._lock = threading.RLock()

    # --- Observers ------------------------------------------------------------

    def subscribe(self, event_type: type[DomainEvent], handler: Callable) -> None:
        """Register *handler* to be called with every event of *event_type*."""
        self._events.subscribe(event_type, handler)

    def unsubscribe(self, event_type: type[DomainEvent], handler: Callable) -> None:
        self._events.unsubscribe(event_type, handler)

    # --- Users ----------------------------------------------------------------

    def create_user(self, name: str, email: str, wallet: str) -> int:
        with self._operation("create_user") as pending:
            user = User(
                id=0,
                name=name,
                email=email,
                wallet=wallet,
                registration_date=self._clock(),
                is_active=True,
            )
            self._users.save(user)
            logger.info("Created user #%d", user.id)
            pending.append(
                UserCreated(user_id=user.id, name=user.name, wallet=user.wallet)
            )
            return user.id

    def create_user_profile(
        self,
        user_id: int,
        street: str,
        city: str,
        state: str,
        zip_code: str,
        country: str,
    ) -> None:
        """Create, or silently replace, the profile of an existing user.

        Replacing resets the order counters and re-snapshots the user.
        """
        with self._operation("create_user_profile"):
            user = self._require_user(user_id)

            if self._profiles.get_by_user_id(user_id) is not None:
                logger.warning(
                    "Replacing existing profile for user #%d; counters reset",
                    user_id,
                )
            address = Address(
                street=street,
                city=city,
                state=state,
                zip_code=zip_code,
                country=country,
            )
            self._profiles.save(UserProfile.create(user, address))
            logger.info("Created profile for user #%d", user_id)

    # --- Products -------------------------------------------------------------

    def add_product(
        self,
        name: str,
        description: str,
        price: int,
        stock: int,
        owner: str,
    ) -> int:
        with self._operation("add_product") as pending:
            product = Product(
                id=0,
                name=name,
                description=description,
                price=price,
                stock=stock,
                owner=owner,
            )
            self._products.save(product)
            logger.info(
                "Added product #%d '%s' (price=%d, stock=%d)",
                product.id, product.name, product.price, product.stock,
            )
            pending.append(
                ProductAdded(
                    product_id=product.id, name=product.name, price=product.price
                )
            )
            return product.id

    def update_product_stock(self, product_id: int, new_stock: int) -> None:
        """Overwrite a product's stock and recompute its availability."""
        with self._operation("update_product_stock"):
            product = self._require_product(product_id)
            product.set_stock(new_stock)
            self._products.save(product)
            logger.info("Product #%d stock set to %d", product_id, new_stock)

    # --- Orders ---------------------------------------------------------------

    def place_order(self, user_id: int, product_id: int, quantity: int) -> int:
        """Place an order for *quantity* units of a product.

        Checks, in order: the user exists, the product exists, stock covers
        the quantity, the product is available. On success the order is
        recorded, stock is decremented and the user's profile (if any)
        earns one order and ``quantity * 10`` loyalty points.
        """
        with self._operation("place_order") as pending:
            # Phase 1: load and validate
            qty = Quantity(quantity)
            self._require_user(user_id)
            product = self._require_product(product_id)
            product.check_can_supply(qty)
            profile = self._profiles.get_by_user_id(user_id)

            # Phase 2: mutate and persist
            order = Order(
                id=0,
                user_id=user_id,
                product_id=product_id,
                quantity=qty.value,
                total_price=product.price_for(qty),  # <-- price snapshot
                status=OrderStatus.PENDING,
                order_date=self._clock(),
            )
            product.deduct_stock(qty)
            self._orders.save(order)
            self._products.save(product)
            if profile is not None:
                profile.record_order(qty)
                self._profiles.save(profile)

            logger.info(
                "Placed order #%d: user #%d bought %d x product #%d for %d",
                order.id, user_id, qty.value, product_id, order.total_price,
            )
            pending.append(
                OrderPlaced(order_id=order.id, user_id=user_id, product_id=product_id)
            )
            return order.id

    def update_order_status(
        self, order_id: int, new_status: OrderStatus | str
    ) -> None:
        """Set an order's status. Any status may follow any other.

        A status name such as ``"delivered"`` is accepted in place of the
        enum member.
        """
        with self._operation("update_order_status") as pending:
            # Phase 1: load and validate
            status = OrderStatus.coerce(new_status)
            order = self._orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")

            # Phase 2: mutate and persist
            order.update_status(status, now=self._clock())
            self._orders.save(order)
            logger.info("Order #%d status set to %s", order_id, status.value)
            pending.append(OrderStatusUpdated(order_id=order_id, new_status=status))

    # --- Queries --------------------------------------------------------------

    def get_user(self, user_id: int) -> User:
        with self._lock:
            return self._users.get_by_id(user_id) or User.empty()

    def get_product(self, product_id: int) -> Product:
        with self._lock:
            return self._products.get_by_id(product_id) or Product.empty()

    def get_order(self, order_id: int) -> Order:
        with self._lock:
            return self._orders.get_by_id(order_id) or Order.empty()

    def get_user_profile(self, user_id: int) -> UserProfile:
        with self._lock:
            return self._profiles.get_by_user_id(user_id) or UserProfile.empty()

    def get_order_status(self, order_id: int) -> OrderStatus:
        return self.get_order(order_id).status

    def is_user_active(self, user_id: int) -> bool:
        return self.get_user(user_id).is_active

    def get_product_availability(self, product_id: int) -> bool:
        return self.get_product(product_id).is_available

    def get_total_orders_by_user(self, user_id: int) -> int:
        return self.get_user_profile(user_id).total_orders

    def get_loyalty_points(self, user_id: int) -> int:
        return self.get_user_profile(user_id).loyalty_points

    def list_users(self) -> list[User]:
        with self._lock:
            return self._users.list_all()

    def list_products(self) -> list[Product]:
        with self._lock:
            return self._products.list_all()

    def list_orders(self, user_id: int | None = None) -> list[Order]:
        """Return all orders, or only those placed by *user_id*."""
        with self._lock:
            orders = self._orders.list_all()
        if user_id is None:
            return orders
        return [o for o in orders if o.user_id == user_id]

    # --- Internal helpers -----------------------------------------------------

    @contextmanager
    def _operation(self, name: str) -> Iterator[list[DomainEvent]]:
        """Serialize a mutating operation and log it if it is rejected.

        Events appended to the yielded list are published once the body
        has finished without error, still under the lock. A failing
        handler surfaces to the caller but does not count as a rejection:
        the operation's writes are already in place.
        """
        pending: list[DomainEvent] = []
        with self._lock:
            try:
                yield pending
            except DomainException as exc:
                logger.warning("%s rejected: %s", name, exc)
                raise
            for event in pending:
                self._events.publish(event)

    def _require_user(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User #{user_id} not found")
        return user

    def _require_product(self, product_id: int) -> Product:
        product = self._products.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product
