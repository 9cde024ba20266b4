from __future__ import annotations

import logging
from typing import Any, Callable, List, Protocol

from core.debounce import Debouncer, Scheduler
from core.favorites import FavoritesStore
from core.lyrics_client import LyricsOvhClient
from core.models import FavoriteEntry
from core.render import (
    Action,
    FavoritesView,
    FollowLink,
    RemoveFavorite,
    ResultsView,
    SaveFavorite,
    ShowPlaceholder,
    ViewLyrics,
    render_favorites,
    render_lyrics,
    render_message,
    render_placeholder,
    render_search_results,
)

logger = logging.getLogger(__name__)

EMPTY_TERM_WARNING = "Please type in a search term"
SEARCH_FAILED_MESSAGE = "There was an error fetching results. Try again."
MORE_FAILED_MESSAGE = "Couldn't load more results."
LYRICS_FAILED_MESSAGE = "Failed to load lyrics. Try again."

DEFAULT_DEBOUNCE_MS = 700
DEFAULT_MIN_LIVE_CHARS = 2


class SearchView(Protocol):
    def show_results(self, view: ResultsView) -> None: ...
    def show_favorites(self, view: FavoritesView) -> None: ...
    def set_loading(self, loading: bool) -> None: ...
    def warn(self, message: str) -> None: ...


class RequestRunner(Protocol):
    def submit(
        self,
        call: Callable[[], Any],
        on_success: Callable[[Any], None],
        on_error: Callable[[BaseException], None],
    ) -> None: ...


class SearchController:
    def __init__(
        self,
        client: LyricsOvhClient,
        favorites: FavoritesStore,
        view: SearchView,
        runner: RequestRunner,
        scheduler: Scheduler,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        min_live_chars: int = DEFAULT_MIN_LIVE_CHARS,
    ):
        self.client = client
        self.favorites = favorites
        self.view = view
        self.runner = runner
        self.min_live_chars = int(min_live_chars)
        self._debouncer = Debouncer(scheduler, debounce_ms)

        self.favorites.subscribe(self._on_favorites_changed)

    def start(self) -> None:
        self._on_favorites_changed(self.favorites.load())

    # ------------------ settings ------------------
    def set_debounce_ms(self, ms: int) -> None:
        self._debouncer.cancel()
        self._debouncer.delay_ms = int(ms)

    def set_min_live_chars(self, n: int) -> None:
        self.min_live_chars = int(n)

    # ------------------ input ------------------
    def submit(self, text: str) -> None:
        term = (text or "").strip()
        if not term:
            self.view.warn(EMPTY_TERM_WARNING)
            return
        self.search(term)

    def text_changed(self, text: str) -> None:
        self._debouncer.trigger(lambda: self._live_search(text))

    def _live_search(self, text: str) -> None:
        term = (text or "").strip()
        if len(term) >= self.min_live_chars:
            self.search(term)

    # ------------------ remote lookups ------------------
    def search(self, term: str) -> None:
        self._request(lambda: self.client.search(term), render_search_results, SEARCH_FAILED_MESSAGE)

    def follow_link(self, url: str) -> None:
        self._request(lambda: self.client.follow_link(url), render_search_results, MORE_FAILED_MESSAGE)

    def open_lyrics(self, artist: str, title: str) -> None:
        self._request(
            lambda: self.client.fetch_lyrics(artist, title),
            lambda result: render_lyrics(artist, title, result),
            LYRICS_FAILED_MESSAGE,
        )

    def _request(self, call: Callable[[], Any], render: Callable[[Any], ResultsView], failure_message: str) -> None:
        self.view.set_loading(True)

        def on_success(payload):
            try:
                self.view.show_results(render(payload))
            finally:
                self.view.set_loading(False)

        def on_error(exc: BaseException):
            logger.warning("%s (%s)", failure_message, exc, exc_info=exc)
            try:
                # render_message carries no navigation, which clears Prev/Next
                self.view.show_results(render_message(failure_message))
            finally:
                self.view.set_loading(False)

        self.runner.submit(call, on_success, on_error)

    # ------------------ local actions ------------------
    def back(self) -> None:
        self.view.show_results(render_placeholder())

    def save_favorite(self, artist: str, title: str) -> bool:
        return self.favorites.add(artist, title)

    def remove_favorite(self, index: int) -> None:
        self.favorites.remove_at(index)

    def dispatch(self, action: Action) -> None:
        if isinstance(action, ViewLyrics):
            self.open_lyrics(action.artist, action.title)
        elif isinstance(action, SaveFavorite):
            self.save_favorite(action.artist, action.title)
        elif isinstance(action, RemoveFavorite):
            self.remove_favorite(action.index)
        elif isinstance(action, FollowLink):
            self.follow_link(action.url)
        elif isinstance(action, ShowPlaceholder):
            self.back()
        else:
            raise TypeError(f"Unknown action: {action!r}")

    def _on_favorites_changed(self, entries: List[FavoriteEntry]) -> None:
        self.view.show_favorites(render_favorites(entries))
