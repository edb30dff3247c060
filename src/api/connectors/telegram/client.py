"""Cliente da Telegram Bot API.

Todas as chamadas são POST em https://api.telegram.org/bot<token>/<method>.
Opções são aceitas como kwargs (snake_case); dicts aninhados em camelCase
(ex: reply_markup={"inlineKeyboard": [...]}) são convertidos para o wire.
Resultados em dict/list voltam em camelCase.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from api.connectors.http_base import HttpClient, HttpClientConfig, OnRequest, compact
from api.connectors.telegram.models import TelegramEnvelope
from config.settings.telegram import TELEGRAM_API_ORIGIN, TelegramSettings
from utils.case import to_idiomatic_case, to_wire_case

if TYPE_CHECKING:
    import httpx


def _parse_envelope(data: Any) -> TelegramEnvelope | None:
    if not isinstance(data, Mapping):
        return None
    try:
        return TelegramEnvelope.model_validate(data)
    except ValidationError:
        return None


def _to_coordinates(location: Mapping[str, Any] | Sequence[float]) -> dict[str, Any]:
    """Aceita {"latitude", "longitude"} ou (latitude, longitude)."""
    if isinstance(location, Mapping):
        return {"latitude": location["latitude"], "longitude": location["longitude"]}
    latitude, longitude = location
    return {"latitude": latitude, "longitude": longitude}


class TelegramClient(HttpClient):
    """Cliente HTTP da Telegram Bot API.

    Exemplo:
        async with TelegramClient("123:ABC") as client:
            message = await client.send_message(chat_id, "Olá")
            message["messageId"]
    """

    platform_name = "Telegram"

    def __init__(
        self,
        access_token_or_settings: str | TelegramSettings,
        *,
        origin: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        on_request: OnRequest | None = None,
    ) -> None:
        """Inicializa cliente Telegram.

        Args:
            access_token_or_settings: Token do bot ou TelegramSettings
            origin: Origem alternativa da Bot API (só com token)
            http_client: httpx.AsyncClient injetado (testes, pool próprio)
            on_request: Hook chamado antes de cada requisição

        Raises:
            ValueError: Se o token estiver vazio.
        """
        if isinstance(access_token_or_settings, TelegramSettings):
            settings = access_token_or_settings
        else:
            settings = TelegramSettings(
                access_token=access_token_or_settings or "",
                api_origin=origin or TELEGRAM_API_ORIGIN,
            )
        if not settings.access_token or not settings.access_token.strip():
            raise ValueError(
                "access_token é obrigatório para o cliente Telegram. "
                "Verifique se TELEGRAM_ACCESS_TOKEN está configurado."
            )
        super().__init__(
            HttpClientConfig(
                base_url=settings.api_endpoint,
                timeout_seconds=settings.request_timeout_seconds,
            ),
            http_client=http_client,
            on_request=on_request,
        )
        self._access_token = settings.access_token

    @property
    def access_token(self) -> str:
        return self._access_token

    def _describe_error(self, response: httpx.Response) -> str:
        try:
            envelope = _parse_envelope(response.json())
        except ValueError:
            envelope = None
        if envelope is None:
            return super()._describe_error(response)
        return envelope.error_message(with_code=True)

    async def _call(self, method: str, body: Mapping[str, Any] | None = None) -> Any:
        """Chama um método da Bot API e retorna `result` em camelCase."""
        response = await self.request("POST", method, body=to_wire_case(compact(body or {})))
        envelope = _parse_envelope(self._read_json(response, method))
        if envelope is None:
            self._raise_platform_error("Telegram API - malformed response", response, method)
        if not envelope.ok:
            self._raise_platform_error(envelope.error_message(with_code=False), response, method)

        if isinstance(envelope.result, (Mapping, list)):
            return to_idiomatic_case(envelope.result)
        return envelope.result

    async def get_me(self) -> dict[str, Any]:
        """Informações básicas do bot."""
        return await self._call("getMe")

    async def get_updates(self, **options: Any) -> list[dict[str, Any]]:
        """Long polling de updates (offset, limit, timeout, allowed_updates)."""
        return await self._call("getUpdates", options)

    async def get_webhook_info(self) -> dict[str, Any]:
        return await self._call("getWebhookInfo")

    async def set_webhook(self, url: str, **options: Any) -> bool:
        """Configura webhook (certificate, max_connections, allowed_updates...)."""
        return await self._call("setWebhook", {"url": url, **options})

    async def delete_webhook(self, **options: Any) -> bool:
        return await self._call("deleteWebhook", options)

    async def send_message(self, chat_id: int | str, text: str, **options: Any) -> dict[str, Any]:
        """Envia mensagem de texto (parse_mode, reply_markup, ...)."""
        return await self._call("sendMessage", {"chat_id": chat_id, "text": text, **options})

    async def send_photo(self, chat_id: int | str, photo: Any, **options: Any) -> dict[str, Any]:
        """Envia foto por file_id, URL ou conteúdo binário (multipart)."""
        return await self._call("sendPhoto", {"chat_id": chat_id, "photo": photo, **options})

    async def send_document(
        self, chat_id: int | str, document: Any, **options: Any
    ) -> dict[str, Any]:
        """Envia documento por file_id, URL ou conteúdo binário (multipart)."""
        return await self._call(
            "sendDocument", {"chat_id": chat_id, "document": document, **options}
        )

    async def send_location(
        self,
        chat_id: int | str,
        location: Mapping[str, Any] | Sequence[float],
        **options: Any,
    ) -> dict[str, Any]:
        """Envia localização; aceita mapping ou tupla (latitude, longitude)."""
        return await self._call(
            "sendLocation", {"chat_id": chat_id, **_to_coordinates(location), **options}
        )

    async def send_chat_action(self, chat_id: int | str, action: str) -> bool:
        """Indicador de atividade ("typing", "upload_photo", ...)."""
        return await self._call("sendChatAction", {"chat_id": chat_id, "action": action})

    async def forward_message(
        self,
        chat_id: int | str,
        from_chat_id: int | str,
        message_id: int,
        **options: Any,
    ) -> dict[str, Any]:
        return await self._call(
            "forwardMessage",
            {
                "chat_id": chat_id,
                "from_chat_id": from_chat_id,
                "message_id": message_id,
                **options,
            },
        )

    async def edit_message_text(self, text: str, **options: Any) -> dict[str, Any] | bool:
        """Edita texto; identificar por chat_id+message_id ou inline_message_id."""
        return await self._call("editMessageText", {"text": text, **options})

    async def delete_message(self, chat_id: int | str, message_id: int) -> bool:
        return await self._call("deleteMessage", {"chat_id": chat_id, "message_id": message_id})

    async def answer_callback_query(self, callback_query_id: str, **options: Any) -> bool:
        return await self._call(
            "answerCallbackQuery", {"callback_query_id": callback_query_id, **options}
        )

    async def get_chat(self, chat_id: int | str) -> dict[str, Any]:
        return await self._call("getChat", {"chat_id": chat_id})

    async def get_file(self, file_id: str) -> dict[str, Any]:
        """Metadados do arquivo (file_path para download)."""
        return await self._call("getFile", {"file_id": file_id})


def create_telegram_client(
    settings: TelegramSettings | None = None,
    **kwargs: Any,
) -> TelegramClient:
    """Factory para criar cliente Telegram a partir das settings.

    Args:
        settings: TelegramSettings opcional. Se None, carrega do ambiente.
        **kwargs: Repassados ao construtor (http_client, on_request).
    """
    from config.settings import get_telegram_settings

    return TelegramClient(settings or get_telegram_settings(), **kwargs)
