"""Tests for switchyard.http.headers — case-insensitive request headers."""

import pytest

from switchyard.http.headers import Headers


class TestHeaders:
    def test_case_insensitive(self) -> None:
        headers = Headers(((b"content-type", b"text/plain"),))
        assert headers["Content-Type"] == "text/plain"
        assert "CONTENT-TYPE" in headers

    def test_multiple_values(self) -> None:
        headers = Headers(((b"accept", b"a"), (b"Accept", b"b")))
        assert headers["accept"] == "a"
        assert headers.get_list("accept") == ["a", "b"]
        assert len(headers) == 1

    def test_missing(self) -> None:
        headers = Headers()
        assert headers.get("x") is None
        with pytest.raises(KeyError):
            headers["x"]
        assert 42 not in headers

    def test_from_dict(self) -> None:
        headers = Headers.from_dict({"X-Trace": "abc"})
        assert headers.raw == ((b"x-trace", b"abc"),)
