"""Abstract repository for User entities.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from recordstore.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user, ordered by ID."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a user. A user with ``id == 0`` is assigned the next ID."""
