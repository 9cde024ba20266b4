from __future__ import annotations

import json
import logging
from typing import Callable, Iterable, List, Optional

from core.models import FavoriteEntry
from core.storage import KeyValueStorage

logger = logging.getLogger(__name__)

FAVORITES_KEY = "lyricsFavorites"

FavoritesListener = Callable[[List[FavoriteEntry]], None]


def _parse_entries(raw: str) -> List[FavoriteEntry]:
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError("favorites payload is not a list")

    out: List[FavoriteEntry] = []
    for item in data:
        if not isinstance(item, dict):
            raise ValueError(f"favorite entry is not an object: {item!r}")
        artist = item.get("artist")
        title = item.get("title")
        if not isinstance(artist, str) or not isinstance(title, str):
            raise ValueError(f"favorite entry without artist/title: {item!r}")
        out.append(FavoriteEntry(artist=artist, title=title))
    return out


class FavoritesStore:
    """
    Saved (artist, title) pairs kept in one storage slot as a JSON array.

    Every read loads the whole slot and every write replaces it. Listeners are
    called with the saved list after each write.
    """

    def __init__(self, storage: KeyValueStorage, key: str = FAVORITES_KEY):
        self.storage = storage
        self.key = key
        self._listeners: list[FavoritesListener] = []

    def subscribe(self, listener: FavoritesListener) -> None:
        self._listeners.append(listener)

    def load(self) -> List[FavoriteEntry]:
        raw = self.storage.get_item(self.key)
        if not raw:
            return []
        try:
            return _parse_entries(raw)
        except ValueError as e:
            # json.JSONDecodeError is a ValueError too
            logger.warning("Ignoring malformed favorites payload: %s", e)
            return []

    def save(self, entries: Iterable[FavoriteEntry]) -> None:
        entries = list(entries)
        self.storage.set_item(self.key, json.dumps([e.to_json() for e in entries]))
        for listener in list(self._listeners):
            listener(list(entries))

    def add(self, artist: str, title: str) -> bool:
        favs = self.load()
        # exact match on both fields, no case folding
        if any(f.artist == artist and f.title == title for f in favs):
            return False
        favs.append(FavoriteEntry(artist=artist, title=title))
        self.save(favs)
        return True

    def remove_at(self, index: int) -> Optional[FavoriteEntry]:
        favs = self.load()
        if index < 0 or index >= len(favs):
            return None
        removed = favs.pop(index)
        self.save(favs)
        return removed
