from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """In-memory backend for tests; the application persists through db.database.SqliteStorage."""

    def __init__(self, items: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
