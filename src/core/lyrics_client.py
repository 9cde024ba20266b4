from __future__ import annotations

import logging
import threading
from typing import Callable, Optional
from urllib.parse import quote

import requests

from core.models import LyricsResult, PaginationLinks, SearchResponse, SongSummary

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.lyrics.ovh"

# Same unreserved set as JavaScript's encodeURIComponent.
_SEGMENT_SAFE = "-_.!~*'()"


class NetworkError(Exception):
    """Transport failure or a response that is not the expected JSON payload."""


def encode_segment(value: str) -> str:
    return quote(value, safe=_SEGMENT_SAFE)


def _opt_link(value) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def parse_search_response(payload) -> SearchResponse:
    if not isinstance(payload, dict):
        raise NetworkError("Search response is not a JSON object")

    items = payload.get("data")
    if items is None:
        items = []
    if not isinstance(items, list):
        raise NetworkError("Search response 'data' is not a list")

    songs: list[SongSummary] = []
    for item in items:
        artist = item.get("artist") if isinstance(item, dict) else None
        name = artist.get("name") if isinstance(artist, dict) else None
        title = item.get("title") if isinstance(item, dict) else None
        if not isinstance(name, str) or not isinstance(title, str):
            raise NetworkError(f"Malformed song item: {item!r}")
        songs.append(SongSummary(artist=name, title=title))

    links = PaginationLinks(prev=_opt_link(payload.get("prev")), next=_opt_link(payload.get("next")))
    return SearchResponse(songs=tuple(songs), links=links)


def parse_lyrics_response(payload) -> LyricsResult:
    if not isinstance(payload, dict):
        raise NetworkError("Lyrics response is not a JSON object")

    error = payload.get("error")
    if error:
        return LyricsResult(error=str(error))

    lyrics = payload.get("lyrics")
    if not isinstance(lyrics, str):
        raise NetworkError("Lyrics response has neither 'lyrics' nor 'error'")
    return LyricsResult(lyrics=lyrics)


class LyricsOvhClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = "lyrics-finder/0.1",
        session: requests.Session | None = None,
        session_factory: Callable[[], requests.Session] | None = None,
    ):
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.user_agent = user_agent
        if session is not None:
            session_factory = lambda: session
        self._session_factory = session_factory or requests.Session
        # requests.Session is not thread-safe; each worker thread gets its own
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        s = getattr(self._local, "session", None)
        if s is None:
            s = self._session_factory()
            s.headers.update({"User-Agent": self.user_agent})
            self._local.session = s
        return s

    def search(self, term: str) -> SearchResponse:
        # GET /suggest/<term>
        return parse_search_response(self._get_json(f"{self.base_url}/suggest/{encode_segment(term)}"))

    def follow_link(self, url: str) -> SearchResponse:
        # prev/next are absolute URLs handed out by the API; fetch them untouched
        return parse_search_response(self._get_json(url))

    def fetch_lyrics(self, artist: str, title: str) -> LyricsResult:
        # GET /v1/<artist>/<title>
        url = f"{self.base_url}/v1/{encode_segment(artist)}/{encode_segment(title)}"
        return parse_lyrics_response(self._get_json(url))

    def _get_json(self, url: str):
        logger.debug("GET %s", url)
        try:
            r = self.session.get(url)
        except requests.RequestException as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e

        # The status code is not checked: a 404 from /v1 still carries {"error": ...}.
        try:
            return r.json()
        except ValueError as e:
            raise NetworkError(f"Response from {url} is not JSON (HTTP {r.status_code})") from e
