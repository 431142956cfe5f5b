"""Tests for switchyard.http.response — the mutable response writer."""

import asyncio

import pytest

from switchyard.errors import HTTPError, ResponseAlreadySent
from switchyard.http.response import Response, error_status


class TestHeaders:
    def test_set_replaces_case_insensitively(self) -> None:
        response = Response()
        response.set_header("X-Thing", "one")
        response.set_header("x-thing", "two")
        assert response.headers == (("x-thing", "two"),)
        assert response.get_header("X-THING") == "two"

    def test_add_keeps_existing(self) -> None:
        response = Response()
        response.add_header("Set-Cookie", "a=1")
        response.add_header("Set-Cookie", "b=2")
        assert len(response.headers) == 2

    def test_remove(self) -> None:
        response = Response()
        response.set_header("X-Gone", "1")
        response.remove_header("x-gone")
        assert not response.has_header("X-Gone")
        assert response.get_header("X-Gone", "default") == "default"


class TestEnd:
    def test_end_finishes_once(self) -> None:
        response = Response()
        assert not response.finished
        response.end("body")
        assert response.finished
        assert response.headers_sent
        assert response.body == b"body"
        with pytest.raises(ResponseAlreadySent):
            response.end("again")

    def test_text_gets_default_content_type(self) -> None:
        response = Response(default_content_type="text/html; charset=utf-8")
        response.end("<p>hi</p>")
        assert response.get_header("content-type") == "text/html; charset=utf-8"

    def test_existing_content_type_kept(self) -> None:
        response = Response()
        response.set_header("Content-Type", "text/csv")
        response.end("a,b")
        assert response.get_header("content-type") == "text/csv"

    def test_empty_body_has_no_content_type(self) -> None:
        response = Response()
        response.end()
        assert response.body == b""
        assert not response.has_header("content-type")

    async def test_wait_finished(self) -> None:
        response = Response()
        asyncio.get_running_loop().call_soon(response.end, "later")
        await asyncio.wait_for(response.wait_finished(), timeout=1.0)
        assert response.body == b"later"

    async def test_wait_finished_after_end(self) -> None:
        response = Response()
        response.end()
        await asyncio.wait_for(response.wait_finished(), timeout=1.0)


class TestSend:
    def test_status_only(self) -> None:
        response = Response()
        response.send(201)
        assert response.status == 201
        assert response.body == b""

    def test_text_only(self) -> None:
        response = Response()
        response.send("Hello")
        assert response.status == 200
        assert response.body == b"Hello"

    def test_bytes(self) -> None:
        response = Response()
        response.send(b"\x00\x01")
        assert response.body == b"\x00\x01"

    def test_status_and_text(self) -> None:
        response = Response()
        response.send(201, "Created")
        assert (response.status, response.body) == (201, b"Created")

    def test_json_object(self) -> None:
        response = Response()
        response.send({"status": 200, "response": "OK"})
        assert response.body == b'{"status": 200, "response": "OK"}'
        assert response.get_header("content-type") == "application/json"

    def test_json_array_with_status(self) -> None:
        response = Response()
        response.send(201, [1, "a"])
        assert response.status == 201
        assert response.body == b'[1, "a"]'

    def test_explicit_none_is_json_null(self) -> None:
        response = Response()
        response.send(201, None)
        assert response.status == 201
        assert response.body == b"null"
        assert response.get_header("content-type") == "application/json"

    def test_none_alone_is_json_null(self) -> None:
        response = Response()
        response.send(None)
        assert response.status == 200
        assert response.body == b"null"

    def test_no_arguments_ends_empty(self) -> None:
        response = Response()
        response.send()
        assert response.finished
        assert response.body == b""
        assert response.get_header("content-type") is None

    def test_error_uses_own_status(self) -> None:
        response = Response()
        response.send(HTTPError(555, "Test Error"))
        assert response.status == 555
        assert response.body == b"Test Error"

    def test_explicit_status_beats_error_status(self) -> None:
        response = Response()
        response.send(500, HTTPError(555, "Test Error"))
        assert response.status == 500
        assert response.body == b"Test Error"

    def test_plain_exception_defaults_to_500(self) -> None:
        response = Response()
        response.send(ValueError("bad value"))
        assert response.status == 500
        assert response.body == b"bad value"

    def test_exception_with_status_attribute(self) -> None:
        error = RuntimeError("teapot")
        error.status = 418  # type: ignore[attr-defined]
        response = Response()
        response.send(error)
        assert response.status == 418

    def test_body_without_status_rejected(self) -> None:
        response = Response()
        with pytest.raises(TypeError):
            response.send("text", "more")
        assert not response.finished

    def test_send_twice(self) -> None:
        response = Response()
        response.send("one")
        with pytest.raises(ResponseAlreadySent):
            response.send("two")


class TestErrorStatus:
    def test_default(self) -> None:
        assert error_status(ValueError()) == 500
        assert error_status("plain string", default=404) == 404

    def test_status_attribute(self) -> None:
        assert error_status(HTTPError(409)) == 409

    @pytest.mark.parametrize("status", [0, -1, "500", True, None])
    def test_invalid_status_ignored(self, status: object) -> None:
        error = RuntimeError()
        error.status = status  # type: ignore[attr-defined]
        assert error_status(error) == 500
