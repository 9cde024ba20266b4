import threading

import pytest
import requests

from core.lyrics_client import LyricsOvhClient, NetworkError, encode_segment
from core.models import SongSummary

from conftest import BASE, FakeResponse, StubSession


def _client(session) -> LyricsOvhClient:
    return LyricsOvhClient(base_url=BASE + "/", session=session)


def test_encode_segment_matches_encode_uri_component() -> None:
    assert encode_segment("AC/DC") == "AC%2FDC"
    assert encode_segment("rock & roll") == "rock%20%26%20roll"
    assert encode_segment("what?#") == "what%3F%23"
    assert encode_segment("don't (stop)!*~._-") == "don't%20(stop)!*~._-"
    assert encode_segment("café") == "caf%C3%A9"


def test_search_parses_songs_and_links() -> None:
    url = f"{BASE}/suggest/hello%20world"
    session = StubSession({
        url: FakeResponse({
            "data": [
                {"artist": {"name": "Adele"}, "title": "Hello"},
                {"artist": {"name": "Lionel Richie"}, "title": "Hello", "album": {}},
            ],
            "next": "http://api.deezer.com/search?limit=15&q=hello&index=15",
        })
    })

    resp = _client(session).search("hello world")

    assert session.calls == [url]
    assert resp.songs == (SongSummary("Adele", "Hello"), SongSummary("Lionel Richie", "Hello"))
    assert resp.links.prev is None
    assert resp.links.next == "http://api.deezer.com/search?limit=15&q=hello&index=15"
    assert not resp.is_empty


def test_search_without_data_is_empty() -> None:
    session = StubSession({f"{BASE}/suggest/zzz": FakeResponse({"data": [], "prev": None, "next": None})})

    resp = _client(session).search("zzz")

    assert resp.is_empty
    assert not resp.links.any


def test_follow_link_fetches_url_verbatim() -> None:
    link = "http://api.deezer.com/search?limit=15&q=a%20b&index=30"
    session = StubSession({link: FakeResponse({"data": [{"artist": {"name": "A"}, "title": "B"}], "prev": link})})

    resp = _client(session).follow_link(link)

    assert session.calls == [link]
    assert resp.songs == (SongSummary("A", "B"),)


def test_fetch_lyrics_uses_two_encoded_segments() -> None:
    url = f"{BASE}/v1/AC%2FDC/Back%20in%20Black"
    session = StubSession({url: FakeResponse({"lyrics": "Back in black\nI hit the sack"})})

    result = _client(session).fetch_lyrics("AC/DC", "Back in Black")

    assert session.calls == [url]
    assert result.lyrics == "Back in black\nI hit the sack"
    assert not result.not_found


def test_fetch_lyrics_error_payload_on_404() -> None:
    url = f"{BASE}/v1/A/T"
    session = StubSession({url: FakeResponse({"error": "No lyrics found"}, status_code=404)})

    result = _client(session).fetch_lyrics("A", "T")

    assert result.not_found
    assert result.error == "No lyrics found"


def test_transport_failure_raises_network_error() -> None:
    session = StubSession(error=requests.ConnectionError("boom"))

    with pytest.raises(NetworkError):
        _client(session).search("x")


def test_non_json_body_raises_network_error() -> None:
    session = StubSession({f"{BASE}/suggest/x": FakeResponse(invalid_json=True, status_code=502)})

    with pytest.raises(NetworkError):
        _client(session).search("x")


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"data": "nope"},
        {"data": [{"title": "no artist"}]},
        {"data": [{"artist": {"name": "A"}}]},
    ],
)
def test_unexpected_search_shape_raises_network_error(payload) -> None:
    session = StubSession({f"{BASE}/suggest/x": FakeResponse(payload)})

    with pytest.raises(NetworkError):
        _client(session).search("x")


def test_lyrics_payload_without_lyrics_or_error_raises() -> None:
    session = StubSession({f"{BASE}/v1/A/T": FakeResponse({"something": "else"})})

    with pytest.raises(NetworkError):
        _client(session).fetch_lyrics("A", "T")


def test_user_agent_header_is_set() -> None:
    session = StubSession()
    client = LyricsOvhClient(session=session, user_agent="ua/1")
    client.search("x")
    assert session.headers["User-Agent"] == "ua/1"


def test_each_thread_gets_its_own_session() -> None:
    created: list[StubSession] = []

    def factory() -> StubSession:
        s = StubSession()
        created.append(s)
        return s

    client = LyricsOvhClient(base_url=BASE, session_factory=factory)
    client.search("main")
    client.search("main again")

    worker = threading.Thread(target=lambda: client.search("worker"))
    worker.start()
    worker.join()

    assert len(created) == 2
    assert created[0].calls == [f"{BASE}/suggest/main", f"{BASE}/suggest/main%20again"]
    assert created[1].calls == [f"{BASE}/suggest/worker"]
    assert all(s.headers["User-Agent"] == client.user_agent for s in created)
