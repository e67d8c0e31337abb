"""UserProfile aggregate.

A profile is a denormalized view of one user's purchasing history. It
embeds a copy of the user taken when the profile was created; later
changes to the user record are not reflected here.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from recordstore.domain.model.user import User
from recordstore.domain.model.value_objects import Address, Quantity

LOYALTY_POINTS_PER_UNIT = 10


@dataclass
class UserProfile:
    """Per-user order counters plus a copy of the user taken at creation."""

    user: User
    address: Address = field(default_factory=Address)
    total_orders: int = 0
    loyalty_points: int = 0

    @staticmethod
    def create(user: User, address: Address) -> UserProfile:
        """Start a fresh profile with a snapshot of *user* and zeroed counters."""
        return UserProfile(user=replace(user), address=address)

    @staticmethod
    def empty() -> UserProfile:
        return UserProfile(user=User.empty())

    @property
    def user_id(self) -> int:
        return self.user.id

    @property
    def exists(self) -> bool:
        return self.user.id != 0

    def record_order(self, quantity: Quantity) -> None:
        """Account for an order placed after this profile was created."""
        self.total_orders += 1
        self.loyalty_points += quantity.value * LOYALTY_POINTS_PER_UNIT
