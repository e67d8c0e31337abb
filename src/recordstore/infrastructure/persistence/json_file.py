"""Shared plumbing for the JSON-file-backed repositories.

Each table is a single JSON array of objects in its own file.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonTable:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def find(self, key: str, value: object) -> dict | None:
        for raw in self.load():
            if raw[key] == value:
                return raw
        return None

    def upsert(self, key: str, record: dict) -> None:
        """Replace the record whose *key* matches, otherwise append it."""
        records = self.load()
        for i, raw in enumerate(records):
            if raw[key] == record[key]:
                records[i] = record
                break
        else:
            records.append(record)
        self.persist(records)

    def next_id(self) -> int:
        # Records are never deleted, so max + 1 keeps IDs strictly increasing.
        records = self.load()
        if not records:
            return 1
        return max(r["id"] for r in records) + 1

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            logger.info("Creating empty table %s", self._file_path)
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def dump_datetime(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def load_datetime(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
