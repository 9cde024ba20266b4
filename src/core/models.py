# core/models.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FavoriteEntry:
    artist: str
    title: str

    def to_json(self) -> dict:
        return {"artist": self.artist, "title": self.title}


@dataclass(frozen=True)
class SongSummary:
    artist: str
    title: str


@dataclass(frozen=True)
class PaginationLinks:
    prev: Optional[str] = None
    next: Optional[str] = None

    @property
    def any(self) -> bool:
        return bool(self.prev or self.next)


@dataclass(frozen=True)
class SearchResponse:
    songs: tuple[SongSummary, ...] = ()
    links: PaginationLinks = PaginationLinks()

    @property
    def is_empty(self) -> bool:
        return not self.songs


@dataclass(frozen=True)
class LyricsResult:
    lyrics: Optional[str] = None
    error: Optional[str] = None  # service-reported message, e.g. "No lyrics found"

    @property
    def not_found(self) -> bool:
        return self.error is not None
