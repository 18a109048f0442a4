"""A tiny in-memory record store with a fixed number of identifiers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

MAX_RECORDS = 256
"""Identifiers run from 1 to MAX_RECORDS - 1."""


class DatabaseFullError(Exception):
    """Raised when every record identifier has been handed out."""


@dataclass
class Record:
    id: int
    data: str
    active: bool = True

    @property
    def length(self) -> int:
        return len(self.data)


class Database:
    """Records addressed by small integer identifiers, handed out in order."""

    def __init__(self) -> None:
        self._records: dict[int, Record] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._records)

    def create(self, data: str) -> int:
        """Store a new active record and return its identifier."""
        if self._next_id >= MAX_RECORDS:
            raise DatabaseFullError("database is full")
        record_id = self._next_id
        self._next_id += 1
        self._records[record_id] = Record(record_id, data)
        return record_id

    def read(self, record_id: int) -> Record:
        """Return the record with this identifier, active or not."""
        try:
            return self._records[record_id]
        except KeyError:
            raise KeyError(f"no record with id {record_id}") from None

    def update(self, record_id: int, data: str) -> None:
        self.read(record_id).data = data

    def delete(self, record_id: int) -> None:
        """Mark the record inactive; its identifier is not reused."""
        self.read(record_id).active = False

    def data(self, record_id: int) -> str:
        return self.read(record_id).data

    def is_active(self, record_id: int) -> bool:
        record = self._records.get(record_id)
        return record is not None and record.active


def main(argv: Sequence[str] | None = None) -> int:
    db = Database()
    try:
        id1 = db.create("First record")
    except DatabaseFullError:
        print("Failed to create first record")
        return 1
    try:
        id2 = db.create("Second record")
    except DatabaseFullError:
        print("Failed to create second record")
        return 1

    db.data(id1)
    db.data(id2)
    db.update(id1, "Updated first")
    db.delete(id2)

    active1 = db.is_active(id1)
    db.is_active(id2)
    sys.stdout.write(str(int(active1)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())