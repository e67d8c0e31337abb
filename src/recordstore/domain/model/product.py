"""Product aggregate.

Products live independently of orders. Stock moves in two ways only: an
explicit overwrite by the owner, and the decrement applied when an order
is placed. Availability is never stored on its own; it is recomputed
from stock on every write.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from recordstore.domain.exceptions import InvalidStateError
from recordstore.domain.model.value_objects import Quantity, require_non_negative


@dataclass
class Product:
    """A product in the catalog.

    Invariant: ``is_available == (stock > 0)`` after every mutation.
    """

    id: int
    name: str
    description: str
    price: int  # smallest currency unit
    stock: int
    owner: str
    is_available: bool = field(default=False)

    def __post_init__(self) -> None:
        require_non_negative("Product price", self.price)
        require_non_negative("Product stock", self.stock)
        self.is_available = self.stock > 0

    @staticmethod
    def empty() -> Product:
        """The zero-valued record returned for a missing product."""
        return Product(id=0, name="", description="", price=0, stock=0, owner="")

    @property
    def exists(self) -> bool:
        return self.id != 0

    def set_stock(self, new_stock: int) -> None:
        """Overwrite stock unconditionally.

        Outstanding orders are not consulted.
        """
        self.stock = require_non_negative("Product stock", new_stock)
        self.is_available = self.stock > 0

    def check_can_supply(self, quantity: Quantity) -> None:
        """Raise InvalidStateError unless *quantity* units can be sold now."""
        if self.stock < quantity.value:
            raise InvalidStateError(
                f"Insufficient stock for product #{self.id} '{self.name}' "
                f"(need {quantity}, have {self.stock})"
            )
        if not self.is_available:
            raise InvalidStateError(
                f"Product #{self.id} '{self.name}' is not available"
            )

    def deduct_stock(self, quantity: Quantity) -> None:
        """Remove sold units from stock.

        Callers run ``check_can_supply`` first; this method re-checks so the
        aggregate can never go negative on its own.
        """
        self.check_can_supply(quantity)
        self.stock -= quantity.value
        self.is_available = self.stock > 0

    def price_for(self, quantity: Quantity) -> int:
        return self.price * quantity.value
