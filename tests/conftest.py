import pytest
import requests

from core.controller import SearchController
from core.favorites import FavoritesStore
from core.lyrics_client import LyricsOvhClient
from core.storage import MemoryStorage


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, invalid_json: bool = False):
        self._payload = payload
        self.status_code = status_code
        self._invalid_json = invalid_json

    def json(self):
        if self._invalid_json:
            raise requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
        return self._payload


class StubSession:
    """Stands in for requests.Session; records requested URLs."""

    def __init__(self, responses=None, error: Exception | None = None):
        self.headers: dict = {}
        self.calls: list[str] = []
        self._responses = dict(responses or {})
        self._error = error

    def get(self, url, **kwargs):
        self.calls.append(url)
        if self._error:
            raise self._error
        if url not in self._responses:
            return FakeResponse({"data": []})
        return self._responses[url]


class FakeHandle:
    def __init__(self, scheduler, due: int, action):
        self.scheduler = scheduler
        self.due = due
        self.action = action
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Manual clock: advance(ms) fires every due, non-cancelled action."""

    def __init__(self):
        self.now = 0
        self.handles: list[FakeHandle] = []

    def schedule(self, delay_ms, action):
        h = FakeHandle(self, self.now + int(delay_ms), action)
        self.handles.append(h)
        return h

    def advance(self, ms: int) -> None:
        self.now += ms
        due = [h for h in self.handles if not h.cancelled and h.due <= self.now]
        self.handles = [h for h in self.handles if h not in due]
        for h in sorted(due, key=lambda h: h.due):
            h.action()

    @property
    def pending(self) -> int:
        return sum(1 for h in self.handles if not h.cancelled)


class ImmediateRunner:
    def __init__(self):
        self.submitted = 0

    def submit(self, call, on_success, on_error):
        self.submitted += 1
        try:
            result = call()
        except Exception as e:
            on_error(e)
            return
        on_success(result)


class DeferredRunner:
    """Keeps calls pending until complete() so in-flight state can be inspected."""

    def __init__(self):
        self.pending: list = []

    def submit(self, call, on_success, on_error):
        self.pending.append((call, on_success, on_error))

    def complete(self, i: int = 0):
        call, on_success, on_error = self.pending.pop(i)
        try:
            result = call()
        except Exception as e:
            on_error(e)
            return
        on_success(result)


class RecordingView:
    def __init__(self):
        self.results: list = []
        self.favorites: list = []
        self.loading: list[bool] = []
        self.warnings: list[str] = []

    def show_results(self, view):
        self.results.append(view)

    def show_favorites(self, view):
        self.favorites.append(view)

    def set_loading(self, loading):
        self.loading.append(bool(loading))

    def warn(self, message):
        self.warnings.append(message)

    @property
    def last(self):
        return self.results[-1]

    @property
    def is_loading(self) -> bool:
        return bool(self.loading) and self.loading[-1]


BASE = "https://api.example"


@pytest.fixture
def favorites():
    return FavoritesStore(MemoryStorage())


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def view():
    return RecordingView()


def make_controller(session, favorites, view, scheduler, runner=None, **kwargs):
    client = LyricsOvhClient(base_url=BASE, session=session)
    return SearchController(
        client=client,
        favorites=favorites,
        view=view,
        runner=runner or ImmediateRunner(),
        scheduler=scheduler,
        **kwargs,
    )
