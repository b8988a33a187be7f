"""Unit tests for the HTTP page fetcher, with a mocked `requests.Session`."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from artwork_gallery.config import GalleryConfig
from artwork_gallery.errors import NetworkError
from artwork_gallery.remote.fetcher import PageFetcher


def build_payload(ids, total=25, limit=10, current_page=1):
    return {
        "pagination": {
            "total": total,
            "limit": limit,
            "offset": (current_page - 1) * limit,
            "total_pages": (total + limit - 1) // limit,
            "current_page": current_page,
        },
        "data": [
            {
                "id": artwork_id,
                "title": f"Title {artwork_id}",
                "place_of_origin": "Japan",
                "artist_display": "Hokusai",
                "date_start": 1830,
                "date_end": 1833,
            }
            for artwork_id in ids
        ],
    }


def build_session(payload=None, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error", response=response)
    session = MagicMock()
    session.headers = {}
    session.get.return_value = response
    return session


class TestFetch:
    def test_parses_records_and_pagination(self):
        session = build_session(build_payload([11, 12, 13], total=23, limit=3, current_page=2))
        fetcher = PageFetcher(api_url="https://example.org/artworks", page_size=3, session=session)

        page = fetcher.fetch(2)

        assert page.number == 2
        assert page.page_size == 3
        assert page.ids == [11, 12, 13]
        assert page.records[0].title == "Title 11"
        assert page.records[0].date_start == "1830"
        assert page.meta.total == 23
        assert page.meta.total_pages == 8
        assert page.meta.offset == 3

    def test_sends_page_limit_and_fields(self):
        session = build_session(build_payload([1]))
        fetcher = PageFetcher(api_url="https://example.org/artworks", page_size=10, timeout=3.0,
                              fields=["id", "title"], session=session)

        fetcher.fetch(4, page_size=25)

        session.get.assert_called_once_with(
            "https://example.org/artworks",
            params={"page": 4, "limit": 25, "fields": "id,title"},
            headers={},
            timeout=3.0,
        )

    def test_one_request_per_call(self):
        session = build_session(build_payload([1]))
        fetcher = PageFetcher(session=session)
        fetcher.fetch(1)
        fetcher.fetch(1)
        assert session.get.call_count == 2

    def test_missing_pagination_is_derived(self):
        session = build_session({"data": [{"id": 5, "title": None}]})
        page = PageFetcher(page_size=10, session=session).fetch(3)
        assert page.meta.offset == 20
        assert page.meta.current_page == 3
        assert page.records[0].title == ""
        assert page.records[0].artist_display is None

    @pytest.mark.parametrize("page_number", [0, -1])
    def test_rejects_non_positive_page_before_any_request(self, page_number):
        session = build_session(build_payload([1]))
        with pytest.raises(ValueError):
            PageFetcher(session=session).fetch(page_number)
        session.get.assert_not_called()


class TestFailures:
    def test_http_error_status(self):
        session = build_session(status_code=503)
        with pytest.raises(NetworkError) as info:
            PageFetcher(session=session).fetch(7)
        assert info.value.page_number == 7
        assert info.value.status_code == 503

    def test_connection_error(self):
        session = build_session()
        session.get.side_effect = requests.ConnectionError("connection refused")
        with pytest.raises(NetworkError) as info:
            PageFetcher(session=session).fetch(2)
        assert info.value.page_number == 2
        assert "connection refused" in str(info.value)

    def test_timeout(self):
        session = build_session()
        session.get.side_effect = requests.Timeout()
        with pytest.raises(NetworkError) as info:
            PageFetcher(timeout=1.5, session=session).fetch(1)
        assert "1.5" in info.value.reason

    def test_invalid_json(self):
        session = build_session()
        session.get.return_value.json.side_effect = ValueError("Expecting value")
        with pytest.raises(NetworkError):
            PageFetcher(session=session).fetch(1)

    @pytest.mark.parametrize("payload", [[], {"data": None}, {"data": [{"title": "no id"}]}])
    def test_unexpected_content(self, payload):
        session = build_session(payload)
        with pytest.raises(NetworkError):
            PageFetcher(session=session).fetch(1)


def test_from_config():
    config = GalleryConfig(api_url="https://example.org/api", page_size=25, request_timeout=4.0,
                           user_agent="tests/1.0")
    session = build_session(build_payload([1]))
    fetcher = PageFetcher.from_config(config, session=session)
    assert fetcher.api_url == "https://example.org/api"
    assert fetcher.page_size == 25
    assert fetcher.timeout == 4.0
    assert fetcher.headers == {"User-Agent": "tests/1.0"}
    fetcher.fetch(1)
    assert session.get.call_args.kwargs["headers"] == {"User-Agent": "tests/1.0"}
    assert fetcher.fields == list(config.fields)


class TestWithoutSession:
    def test_each_request_uses_requests_get(self):
        response = build_session(build_payload([7, 8])).get.return_value
        fetcher = PageFetcher(api_url="https://example.org/artworks", user_agent="tests/1.0")
        with patch("artwork_gallery.remote.fetcher.requests.get", return_value=response) as get:
            fetcher.fetch(1)
            fetcher.fetch(2)

        assert fetcher.session is None
        assert get.call_count == 2
        assert get.call_args.kwargs["params"]["page"] == 2
        assert get.call_args.kwargs["headers"] == {"User-Agent": "tests/1.0"}

    def test_close_without_session(self):
        PageFetcher().close()

    def test_close_releases_given_session(self):
        session = build_session()
        PageFetcher(session=session).close()
        session.close.assert_called_once_with()
