# core/render.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from core.models import FavoriteEntry, LyricsResult, SearchResponse

NO_RESULTS_MESSAGE = "No results. Try a different search."
PLACEHOLDER_MESSAGE = "Type a search to get results again."
NO_FAVORITES_MESSAGE = "No favorites yet."

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


# -------------------------------
# ACTIONS (attached to buttons)
# -------------------------------
@dataclass(frozen=True)
class ViewLyrics:
    artist: str
    title: str


@dataclass(frozen=True)
class SaveFavorite:
    artist: str
    title: str


@dataclass(frozen=True)
class RemoveFavorite:
    index: int


@dataclass(frozen=True)
class FollowLink:
    url: str


@dataclass(frozen=True)
class ShowPlaceholder:
    pass


Action = Union[ViewLyrics, SaveFavorite, RemoveFavorite, FollowLink, ShowPlaceholder]


# -------------------------------
# DISPLAY TREE
# -------------------------------
@dataclass(frozen=True)
class Button:
    label: str
    action: Action
    small: bool = False


@dataclass(frozen=True)
class Message:
    text: str


@dataclass(frozen=True)
class Heading:
    """Artist in bold followed by ' - title'."""
    artist: str
    title: str

    @property
    def suffix(self) -> str:
        return f" - {self.title}"


@dataclass(frozen=True)
class SongRow:
    heading: Heading
    buttons: tuple[Button, ...]


@dataclass(frozen=True)
class SongList:
    rows: tuple[SongRow, ...]


@dataclass(frozen=True)
class LyricsBody:
    lines: tuple[str, ...]


Node = Union[Message, Heading, SongList, LyricsBody, Button]


@dataclass(frozen=True)
class ResultsView:
    body: tuple[Node, ...] = ()
    navigation: tuple[Button, ...] = ()


@dataclass(frozen=True)
class FavoritesView:
    rows: tuple[SongRow, ...] = ()

    @property
    def empty(self) -> bool:
        return not self.rows


# -------------------------------
# RENDER FUNCTIONS
# -------------------------------
def split_lines(text: str) -> List[str]:
    return _LINE_BREAK_RE.split(text or "")


def render_message(text: str) -> ResultsView:
    return ResultsView(body=(Message(text),))


def render_placeholder() -> ResultsView:
    return render_message(PLACEHOLDER_MESSAGE)


def render_search_results(response: Optional[SearchResponse]) -> ResultsView:
    if response is None or response.is_empty:
        return render_message(NO_RESULTS_MESSAGE)

    rows = tuple(
        SongRow(
            heading=Heading(artist=s.artist, title=s.title),
            buttons=(
                Button("Get Lyrics", ViewLyrics(s.artist, s.title)),
                Button("Save", SaveFavorite(s.artist, s.title), small=True),
            ),
        )
        for s in response.songs
    )

    nav: list[Button] = []
    if response.links.prev:
        nav.append(Button("Prev", FollowLink(response.links.prev)))
    if response.links.next:
        nav.append(Button("Next", FollowLink(response.links.next)))

    return ResultsView(body=(SongList(rows),), navigation=tuple(nav))


def render_lyrics(artist: str, title: str, result: LyricsResult) -> ResultsView:
    if result.not_found:
        return render_message(result.error or "")

    return ResultsView(
        body=(
            Heading(artist=artist, title=title),
            LyricsBody(tuple(split_lines(result.lyrics or ""))),
            Button("Back to results", ShowPlaceholder()),
        )
    )


def render_favorites(entries: Iterable[FavoriteEntry]) -> FavoritesView:
    return FavoritesView(
        rows=tuple(
            SongRow(
                heading=Heading(artist=f.artist, title=f.title),
                buttons=(
                    Button("View", ViewLyrics(f.artist, f.title), small=True),
                    Button("Remove", RemoveFavorite(i), small=True),
                ),
            )
            for i, f in enumerate(entries)
        )
    )
