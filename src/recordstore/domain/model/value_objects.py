"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass

from recordstore.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Address:
    """Postal address embedded in a user profile.

    Plain strings, deliberately unvalidated.
    """

    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    country: str = ""


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


def require_non_negative(label: str, value: int) -> int:
    """Return *value* if it is a non-negative int, else raise ValidationError."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(
            f"{label} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{label} cannot be negative, got {value}")
    return value
