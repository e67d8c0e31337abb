"""Abstract repository for UserProfile aggregate, keyed by user ID."""

from __future__ import annotations

from abc import ABC, abstractmethod

from recordstore.domain.model.profile import UserProfile


class ProfileRepository(ABC):

    @abstractmethod
    def get_by_user_id(self, user_id: int) -> UserProfile | None:
        """Return the profile for a user, or None."""

    @abstractmethod
    def save(self, profile: UserProfile) -> None:
        """Insert or replace the profile for ``profile.user_id``."""
