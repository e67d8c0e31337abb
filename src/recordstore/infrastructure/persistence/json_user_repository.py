"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from pathlib import Path

from recordstore.domain.model.user import User
from recordstore.domain.repository.user_repository import UserRepository
from recordstore.infrastructure.persistence.json_file import (
    JsonTable,
    dump_datetime,
    load_datetime,
)


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._table = JsonTable(file_path)

    # --- UserRepository interface ---------------------------------------------

    def get_by_id(self, user_id: int) -> User | None:
        raw = self._table.find("id", user_id)
        return self.to_domain(raw) if raw is not None else None

    def list_all(self) -> list[User]:
        users = [self.to_domain(raw) for raw in self._table.load()]
        return sorted(users, key=lambda u: u.id)

    def save(self, user: User) -> None:
        if user.id == 0:
            user.id = self._table.next_id()
        self._table.upsert("id", self.to_raw(user))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "wallet": user.wallet,
            "registration_date": dump_datetime(user.registration_date),
            "is_active": user.is_active,
        }

    @staticmethod
    def to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            name=raw["name"],
            email=raw["email"],
            wallet=raw["wallet"],
            registration_date=load_datetime(raw.get("registration_date")),
            is_active=raw.get("is_active", True),
        )
