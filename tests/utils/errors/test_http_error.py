"""Testes para HttpError (construção, status e diagnóstico)."""

from __future__ import annotations

import json

import httpx
import pytest

from utils.errors import HttpError


def _failed_post() -> tuple[httpx.Request, httpx.Response]:
    request = httpx.Request("POST", "https://api.example.com/send", json={"x": 1})
    response = httpx.Response(400, json={"error_status": "boom...."}, request=request)
    return request, response


class TestConstruction:
    """Formas de construção aceitas."""

    def test_message_with_full_context(self) -> None:
        request, response = _failed_post()
        config = {"method": "post", "url": "https://api.example.com/send", "data": '{"x": 1}'}
        error = HttpError("boom....", {"config": config, "request": request, "response": response})

        assert error.message == "boom...."
        assert str(error) == "boom...."
        assert error.config is config
        assert error.request is request
        assert error.response is response
        assert error.status == 400

    def test_message_without_response(self) -> None:
        request, _ = _failed_post()
        error = HttpError("read ECONNRESET", {"request": request})

        assert error.message == "read ECONNRESET"
        assert error.response is None
        assert error.status is None

    def test_from_http_status_error(self) -> None:
        request, response = _failed_post()
        exc = httpx.HTTPStatusError("Client error '400 Bad Request'", request=request, response=response)
        error = HttpError(exc)

        assert error.message == "Client error '400 Bad Request'"
        assert error.request is request
        assert error.response is response
        assert error.status == 400

    def test_message_with_underlying_exception(self) -> None:
        request, response = _failed_post()
        exc = httpx.HTTPStatusError("raw", request=request, response=response)
        error = HttpError("Telegram API - 400 Bad Request", exc)

        assert error.message == "Telegram API - 400 Bad Request"
        assert error.status == 400

    def test_from_request_error_without_request(self) -> None:
        """httpx.RequestError sem request associado não quebra a construção."""
        error = HttpError(httpx.ConnectError("connection refused"))

        assert error.message == "connection refused"
        assert error.request is None
        assert error.status is None

    def test_context_from_object_attributes(self) -> None:
        """Contexto pode ser qualquer objeto com config/request/response."""

        class _Failure:
            config = {"method": "get", "url": "/me"}
            response = {"status": 500}

        error = HttpError("x", _Failure())

        assert error.config == {"method": "get", "url": "/me"}
        assert error.request is None
        assert error.status == 500

    def test_partial_mapping_context(self) -> None:
        error = HttpError("x", {"response": {"status": 502}})

        assert error.config is None
        assert error.request is None
        assert error.status == 502

    def test_message_only(self) -> None:
        error = HttpError("custom error")

        assert error.message == "custom error"
        assert error.config is None
        assert error.request is None
        assert error.response is None
        assert error.status is None

    def test_empty_exception_message_falls_back_to_class_name(self) -> None:
        assert HttpError(httpx.ReadTimeout("")).message == "ReadTimeout"

    def test_non_numeric_status_is_ignored(self) -> None:
        error = HttpError("x", {"response": {"status": "400"}})
        assert error.status is None

    def test_mapping_response_status(self) -> None:
        error = HttpError("x", {"response": {"status": 404, "status_text": "Not Found"}})
        assert error.status == 404

    def test_attributes_are_read_only(self) -> None:
        error = HttpError("x")
        with pytest.raises(AttributeError):
            error.status = 500  # type: ignore[misc]

    def test_is_catchable_as_exception(self) -> None:
        with pytest.raises(HttpError, match="Viber API - invalidAuthToken"):
            raise HttpError("Viber API - invalidAuthToken")


class TestRender:
    """Diagnóstico multi-linha."""

    def test_render_full_context(self) -> None:
        request, response = _failed_post()
        error = HttpError("boom....", {"request": request, "response": response})

        rendered = error.render()

        assert "HttpError: boom...." in rendered
        assert "Error Message -\n  boom...." in rendered
        assert "Request -\n  POST https://api.example.com/send" in rendered
        assert "Request Data -" in rendered
        assert '    "x": 1' in rendered
        assert "Response -\n  400 Bad Request" in rendered
        assert "Response Data -" in rendered
        assert '"error_status": "boom...."' in rendered
        assert rendered.index("Error Message -") < rendered.index("Request -")
        assert rendered.index("Request -") < rendered.index("Response -")

    def test_render_uses_config_descriptor(self) -> None:
        config = {"method": "post", "url": "/me/messages", "data": '{"recipient": {"id": "1"}}'}
        rendered = HttpError("x", {"config": config}).render()

        assert "POST /me/messages" in rendered
        assert '"recipient": {' in rendered

    def test_render_falls_back_to_raw_body(self) -> None:
        config = {"method": "post", "url": "/x", "data": "not json {"}
        rendered = HttpError("x", {"config": config}).render()

        assert "Request Data -\n  not json {" in rendered

    def test_render_binary_body(self) -> None:
        config = {"method": "post", "url": "/upload", "data": b"\xff\xfe\x00"}
        assert "<3 bytes>" in HttpError("x", {"config": config}).render()

    def test_render_without_response(self) -> None:
        """Seção Response vazia e mensagem exata."""
        request, _ = _failed_post()
        rendered = HttpError("Telegram API - 404 Not Found", {"request": request}).render()

        assert "Error Message -\n  Telegram API - 404 Not Found\n" in rendered
        assert "Response -" not in rendered
        assert "None" not in rendered

    def test_render_message_only(self) -> None:
        rendered = HttpError("custom error").render()

        assert "Error Message -\n  custom error" in rendered
        assert "Request -" not in rendered
        assert "Response -" not in rendered

    def test_render_includes_traceback_when_raised(self) -> None:
        try:
            raise HttpError("raised")
        except HttpError as exc:
            rendered = exc.render()
        assert "Traceback (most recent call last)" in rendered

    def test_render_never_raises_on_malformed_context(self) -> None:
        streaming = httpx.Request("POST", "https://x", content=iter([b"a"]))
        unread = httpx.Response(500, stream=httpx.ByteStream(b"{}"))
        weird = {"status": object(), "data": {"a": {1, 2}}}

        for context in (
            {"request": streaming, "response": unread},
            {"config": object(), "response": weird},
            {"config": {"method": 123, "data": 42}, "response": "garbage"},
        ):
            assert isinstance(HttpError("x", context).render(), str)

    def test_to_log_extra_has_no_url(self) -> None:
        request, response = _failed_post()
        extra = HttpError("x", {"request": request, "response": response}).to_log_extra()

        assert extra == {"status": 400, "method": "POST"}
        assert "api.example.com" not in json.dumps(extra)
