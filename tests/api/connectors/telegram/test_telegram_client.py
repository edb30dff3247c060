"""Testes para TelegramClient (sem rede, via httpx.MockTransport)."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.telegram import TelegramClient, create_telegram_client
from config.settings.telegram import TelegramSettings
from tests.fakes.fake_platform_api import FakePlatformApi
from utils.errors import HttpError

TOKEN = "123456:ABC-DEF"


def _ok(result) -> httpx.Response:
    return httpx.Response(200, json={"ok": True, "result": result})


def _client(api: FakePlatformApi) -> TelegramClient:
    return TelegramClient(TOKEN, http_client=api.http_client())


class TestTelegramClientInit:
    """Testes de construção."""

    def test_empty_token_raises(self) -> None:
        with pytest.raises(ValueError, match="access_token"):
            TelegramClient("")

    def test_base_url_contains_token(self) -> None:
        client = TelegramClient(TOKEN)
        assert client.base_url == f"https://api.telegram.org/bot{TOKEN}/"
        assert client.access_token == TOKEN

    def test_custom_origin(self) -> None:
        client = TelegramClient(TOKEN, origin="http://localhost:8081/")
        assert client.base_url == f"http://localhost:8081/bot{TOKEN}/"

    def test_from_settings(self) -> None:
        settings = TelegramSettings(access_token=TOKEN, request_timeout_seconds=5)
        client = create_telegram_client(settings)
        assert client.base_url.endswith(f"/bot{TOKEN}/")


class TestTelegramClientCalls:
    """Chamadas da Bot API."""

    @pytest.mark.asyncio
    async def test_send_message_converts_case_both_ways(self) -> None:
        api = FakePlatformApi(_ok({"message_id": 1, "chat": {"first_name": "a"}}))
        client = _client(api)

        message = await client.send_message(
            427770117,
            "hi",
            parse_mode="HTML",
            reply_markup={"inlineKeyboard": [[{"text": "a", "callbackData": "x"}]]},
        )

        assert message == {"messageId": 1, "chat": {"firstName": "a"}}
        request = api.last_request
        assert request.method == "POST"
        assert request.url.path == f"/bot{TOKEN}/sendMessage"
        assert api.last_json() == {
            "chat_id": 427770117,
            "text": "hi",
            "parse_mode": "HTML",
            "reply_markup": {"inline_keyboard": [[{"text": "a", "callback_data": "x"}]]},
        }

    @pytest.mark.asyncio
    async def test_none_options_are_not_sent(self) -> None:
        api = FakePlatformApi(_ok({"message_id": 2}))
        await _client(api).send_message(1, "hi", parse_mode=None)
        assert api.last_json() == {"chat_id": 1, "text": "hi"}

    @pytest.mark.asyncio
    async def test_boolean_result(self) -> None:
        api = FakePlatformApi(_ok(True))
        assert await _client(api).set_webhook("https://example.com/hook") is True
        assert api.last_json() == {"url": "https://example.com/hook"}

    @pytest.mark.asyncio
    async def test_get_me_without_body(self) -> None:
        api = FakePlatformApi(_ok({"id": 1, "is_bot": True, "first_name": "bot"}))
        me = await _client(api).get_me()
        assert me == {"id": 1, "isBot": True, "firstName": "bot"}
        assert api.last_request.url.path.endswith("/getMe")

    @pytest.mark.asyncio
    async def test_get_updates_list_result(self) -> None:
        api = FakePlatformApi(_ok([{"update_id": 10, "message": {"message_id": 3}}]))
        updates = await _client(api).get_updates(offset=10, allowed_updates=["message"])
        assert updates == [{"updateId": 10, "message": {"messageId": 3}}]
        assert api.last_json() == {"offset": 10, "allowed_updates": ["message"]}

    @pytest.mark.asyncio
    async def test_send_location_accepts_tuple(self) -> None:
        api = FakePlatformApi(_ok({"message_id": 4}))
        await _client(api).send_location(1, (-23.5, -46.6))
        assert api.last_json() == {"chat_id": 1, "latitude": -23.5, "longitude": -46.6}

    @pytest.mark.asyncio
    async def test_send_photo_binary_uses_multipart(self) -> None:
        api = FakePlatformApi(_ok({"message_id": 5}))
        await _client(api).send_photo(1, b"\x89PNG", caption="foto")

        request = api.last_request
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'name="photo"' in request.content
        assert b"foto" in request.content

    @pytest.mark.asyncio
    async def test_send_photo_by_url_uses_json(self) -> None:
        api = FakePlatformApi(_ok({"message_id": 6}))
        await _client(api).send_photo(1, "https://example.com/a.png")
        assert api.last_json() == {"chat_id": 1, "photo": "https://example.com/a.png"}


class TestTelegramClientErrors:
    """Normalização de erros."""

    @pytest.mark.asyncio
    async def test_http_404_message(self) -> None:
        api = FakePlatformApi(
            httpx.Response(404, json={"ok": False, "error_code": 404, "description": "Not Found"})
        )

        with pytest.raises(HttpError) as exc_info:
            await _client(api).get_me()

        assert exc_info.value.message == "Telegram API - 404 Not Found"
        assert exc_info.value.status == 404

    @pytest.mark.asyncio
    async def test_ok_false_in_2xx(self) -> None:
        api = FakePlatformApi(
            httpx.Response(200, json={"ok": False, "description": "Bad Request: chat not found"})
        )

        with pytest.raises(HttpError) as exc_info:
            await _client(api).send_message(1, "hi")

        assert exc_info.value.message == "Telegram API - Bad Request: chat not found"
        assert exc_info.value.status == 200

    @pytest.mark.asyncio
    async def test_non_json_error_body(self) -> None:
        api = FakePlatformApi(httpx.Response(502, text="<html>bad gateway</html>"))

        with pytest.raises(HttpError) as exc_info:
            await _client(api).get_me()

        assert exc_info.value.message == "Telegram API - 502 Bad Gateway"
        assert "<html>bad gateway</html>" in exc_info.value.render()

    @pytest.mark.asyncio
    async def test_error_render_includes_request(self) -> None:
        api = FakePlatformApi(
            httpx.Response(400, json={"ok": False, "error_code": 400, "description": "Bad"})
        )

        with pytest.raises(HttpError) as exc_info:
            await _client(api).send_message(1, "hi")

        rendered = exc_info.value.render()
        assert "Request -\n  POST https://api.telegram.org/" in rendered
        assert '"chat_id": 1' in rendered
        assert "Response -\n  400 Bad Request" in rendered
