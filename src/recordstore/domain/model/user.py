"""User entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """A registered account holder.

    ``id == 0`` marks a record that has not been stored yet, and is also
    what read operations hand back when the requested user does not exist.
    """

    id: int
    name: str
    email: str
    wallet: str
    registration_date: datetime | None = None
    is_active: bool = True

    @staticmethod
    def empty() -> User:
        """The zero-valued record returned for a missing user."""
        return User(id=0, name="", email="", wallet="", is_active=False)

    @property
    def exists(self) -> bool:
        return self.id != 0
