"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry already-formatted data from the store to the CLI without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from recordstore.domain.model.order import Order
from recordstore.domain.model.product import Product
from recordstore.domain.model.profile import UserProfile
from recordstore.domain.model.user import User

_DATE_FORMAT = "%Y-%m-%d %H:%M UTC"


def format_date(value: datetime | None) -> str:
    return value.strftime(_DATE_FORMAT) if value is not None else "-"


@dataclass(frozen=True)
class UserDTO:
    id: int
    name: str
    email: str
    wallet: str
    registered: str
    active: bool

    @staticmethod
    def from_domain(user: User) -> UserDTO:
        return UserDTO(
            id=user.id,
            name=user.name,
            email=user.email,
            wallet=user.wallet,
            registered=format_date(user.registration_date),
            active=user.is_active,
        )


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    description: str
    price: int
    stock: int
    available: bool
    owner: str

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            stock=product.stock,
            available=product.is_available,
            owner=product.owner,
        )


@dataclass(frozen=True)
class OrderDTO:
    id: int
    user_id: int
    product_id: int
    quantity: int
    total_price: int
    status: str
    ordered: str
    delivered: str

    @staticmethod
    def from_domain(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            user_id=order.user_id,
            product_id=order.product_id,
            quantity=order.quantity,
            total_price=order.total_price,
            status=order.status.value,
            ordered=format_date(order.order_date),
            delivered=format_date(order.delivery_date),
        )


@dataclass(frozen=True)
class ProfileDTO:
    user: UserDTO
    address: str
    total_orders: int
    loyalty_points: int

    @staticmethod
    def from_domain(profile: UserProfile) -> ProfileDTO:
        a = profile.address
        parts = [a.street, a.city, a.state, a.zip_code, a.country]
        return ProfileDTO(
            user=UserDTO.from_domain(profile.user),
            address=", ".join(p for p in parts if p),
            total_orders=profile.total_orders,
            loyalty_points=profile.loyalty_points,
        )
