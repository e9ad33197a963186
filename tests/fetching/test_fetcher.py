"""
Tests for fetch_json retry behaviour and location handling.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from exam_archive.fetching.fetcher import (
    DecodeError,
    NetworkError,
    fetch_json,
    is_remote,
    resolve_location,
)

URL = "https://example.org/data/exams.json"


def _response(status=200, reason="OK", payload=None):
    response = MagicMock()
    response.ok = 200 <= status < 400
    response.status_code = status
    response.reason = reason
    response.json.return_value = payload
    return response


@pytest.fixture
def sleep():
    return MagicMock()


class TestRetry:
    """Fixed-delay retry over HTTP."""

    def test_success_on_first_attempt(self, sleep):
        session = MagicMock()
        session.get.return_value = _response(payload=[1, 2])

        assert fetch_json(URL, retries=3, delay_ms=500, session=session, sleep=sleep) == [1, 2]
        session.get.assert_called_once()
        sleep.assert_not_called()

    def test_fails_twice_then_succeeds(self, sleep):
        """Two failures followed by a success return the payload."""
        session = MagicMock()
        session.get.side_effect = [
            _response(503, "Service Unavailable"),
            _response(500, "Internal Server Error"),
            _response(payload={"ok": True}),
        ]

        result = fetch_json(URL, retries=3, delay_ms=250, session=session, sleep=sleep)

        assert result == {"ok": True}
        assert session.get.call_count == 3
        assert sleep.call_count == 2
        sleep.assert_called_with(0.25)

    def test_exhausted_retries_surface_last_error(self, sleep):
        """Only the error of the final attempt is raised."""
        session = MagicMock()
        session.get.side_effect = [
            _response(500, "Internal Server Error"),
            _response(502, "Bad Gateway"),
            _response(404, "Not Found"),
        ]

        with pytest.raises(NetworkError) as exc_info:
            fetch_json(URL, retries=3, delay_ms=10, session=session, sleep=sleep)

        assert exc_info.value.status == 404
        assert exc_info.value.status_text == "Not Found"
        assert str(exc_info.value) == f"Failed to load {URL}: 404 Not Found"
        assert session.get.call_count == 3
        # No wait after the final attempt
        assert sleep.call_count == 2

    def test_transport_error_is_retried(self, sleep):
        session = MagicMock()
        session.get.side_effect = [
            requests.ConnectionError("connection refused"),
            _response(payload=[]),
        ]

        assert fetch_json(URL, retries=2, delay_ms=0, session=session, sleep=sleep) == []
        assert session.get.call_count == 2

    def test_transport_error_has_no_status(self, sleep):
        session = MagicMock()
        session.get.side_effect = requests.Timeout("timed out")

        with pytest.raises(NetworkError) as exc_info:
            fetch_json(URL, retries=1, session=session, sleep=sleep)

        assert exc_info.value.status is None
        assert "timed out" in str(exc_info.value)

    def test_decode_error_is_not_retried(self, sleep):
        response = _response()
        response.json.side_effect = ValueError("Expecting value")
        session = MagicMock()
        session.get.return_value = response

        with pytest.raises(DecodeError):
            fetch_json(URL, retries=3, session=session, sleep=sleep)

        session.get.assert_called_once()
        sleep.assert_not_called()

    def test_retries_must_be_positive(self):
        with pytest.raises(ValueError):
            fetch_json(URL, retries=0)

    def test_owned_session_is_closed(self, sleep):
        with patch("exam_archive.fetching.fetcher.requests.Session") as session_cls:
            session = session_cls.return_value
            session.get.return_value = _response(payload=[])

            fetch_json(URL, retries=1, sleep=sleep)

        session.close.assert_called_once()

    def test_passed_session_is_not_closed(self, sleep):
        session = MagicMock()
        session.get.return_value = _response(payload=[])

        fetch_json(URL, retries=1, session=session, sleep=sleep)

        session.close.assert_not_called()


class TestLocalFiles:
    """Plain paths are read from disk with the same retry policy."""

    def test_reads_local_json(self, tmp_path):
        path = tmp_path / "exams.json"
        path.write_text(json.dumps([{"id": 1}]), encoding="utf-8")

        assert fetch_json(str(path), retries=1) == [{"id": 1}]

    def test_file_url(self, tmp_path):
        path = tmp_path / "lang.json"
        path.write_text('{"en": {}}', encoding="utf-8")

        assert fetch_json(path.as_uri(), retries=1) == {"en": {}}

    def test_missing_file_is_retried(self, tmp_path, sleep):
        with pytest.raises(NetworkError):
            fetch_json(str(tmp_path / "missing.json"), retries=3, delay_ms=100, sleep=sleep)
        assert sleep.call_count == 2

    def test_invalid_json(self, tmp_path, sleep):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DecodeError):
            fetch_json(str(path), retries=3, sleep=sleep)
        sleep.assert_not_called()

    def test_invalid_utf8_is_decode_error(self, tmp_path, sleep):
        """Bytes that are not UTF-8 cannot be JSON and are not retried."""
        path = tmp_path / "exams.json"
        path.write_bytes(b"\xff[]")

        with pytest.raises(DecodeError, match="Invalid UTF-8"):
            fetch_json(str(path), retries=3, sleep=sleep)
        sleep.assert_not_called()


class TestLocations:
    """Tests for is_remote / resolve_location."""

    def test_is_remote(self):
        assert is_remote("https://example.org/a.json")
        assert is_remote("http://example.org/a.json")
        assert not is_remote("data/a.json")
        assert not is_remote("file:///tmp/a.json")

    def test_relative_to_url(self):
        assert resolve_location(URL, "papers/1.pdf") == "https://example.org/data/papers/1.pdf"

    def test_relative_to_path(self):
        assert resolve_location("data/exams.json", "papers/1.pdf") == "data/papers/1.pdf"

    def test_absolute_url_unchanged(self):
        target = "https://cdn.example.org/1.pdf"
        assert resolve_location(URL, target) == target

    def test_no_base(self):
        assert resolve_location("", "papers/1.pdf") == "papers/1.pdf"
