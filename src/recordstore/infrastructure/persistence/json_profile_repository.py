"""JSON-file-backed implementation of ProfileRepository.

The embedded user snapshot is stored inline, not as a reference, so it
keeps the values it had when the profile was created.
"""

from __future__ import annotations

from pathlib import Path

from recordstore.domain.model.profile import UserProfile
from recordstore.domain.model.value_objects import Address
from recordstore.domain.repository.profile_repository import ProfileRepository
from recordstore.infrastructure.persistence.json_file import JsonTable
from recordstore.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)


class JsonProfileRepository(ProfileRepository):

    def __init__(self, file_path: Path) -> None:
        self._table = JsonTable(file_path)

    # --- ProfileRepository interface ------------------------------------------

    def get_by_user_id(self, user_id: int) -> UserProfile | None:
        raw = self._table.find("user_id", user_id)
        return self._to_domain(raw) if raw is not None else None

    def save(self, profile: UserProfile) -> None:
        self._table.upsert("user_id", self._to_raw(profile))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(profile: UserProfile) -> dict:
        address = profile.address
        return {
            "user_id": profile.user_id,
            "user": JsonUserRepository.to_raw(profile.user),
            "address": {
                "street": address.street,
                "city": address.city,
                "state": address.state,
                "zip_code": address.zip_code,
                "country": address.country,
            },
            "total_orders": profile.total_orders,
            "loyalty_points": profile.loyalty_points,
        }

    @staticmethod
    def _to_domain(raw: dict) -> UserProfile:
        return UserProfile(
            user=JsonUserRepository.to_domain(raw["user"]),
            address=Address(**raw["address"]),
            total_orders=raw["total_orders"],
            loyalty_points=raw["loyalty_points"],
        )
