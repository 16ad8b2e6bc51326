"""A list of JSON records kept in one file.

Each repository owns the table for its entity and reads the others it
needs to load relations. The association has its own table of
``{"product_id", "store_id"}`` records.
"""

from __future__ import annotations

import json
from pathlib import Path


class JsonTable:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def load(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def upsert(self, record: dict, key: str = "id") -> None:
        """Replace the record with the same ``key`` value, or append it."""
        records = self.load()
        for i, raw in enumerate(records):
            if raw[key] == record[key]:
                records[i] = record
                break
        else:
            records.append(record)
        self.persist(records)

    def delete_where(self, **match: str) -> None:
        """Delete every record whose fields equal all of ``match``."""
        records = [
            raw for raw in self.load()
            if not all(raw.get(k) == v for k, v in match.items())
        ]
        self.persist(records)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
