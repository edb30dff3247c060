"""Cliente da Viber REST Bot API.

Todas as chamadas são POST em https://chatapi.viber.com/pa/<endpoint>.
O corpo só tem as chaves do primeiro nível convertidas para snake_case:
keyboard e rich_media exigem PascalCase (BgColor, ActionType, ...), e o
resto da mensagem é convertido em profundidade.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from api.connectors.http_base import HttpClient, HttpClientConfig, OnRequest, compact
from api.connectors.viber.models import ViberEnvelope
from config.settings.viber import VIBER_API_ORIGIN, ViberSettings
from utils.case import (
    pascalcase_keys_deep,
    snakecase,
    snakecase_keys,
    snakecase_keys_deep,
    to_idiomatic_case,
)

if TYPE_CHECKING:
    import httpx

_PASCAL_CASE_FIELDS = frozenset({"keyboard", "rich_media"})


def transform_message_case(message: Mapping[str, Any]) -> dict[str, Any]:
    """Converte a mensagem para o wire do Viber.

    keyboard/rich_media (ou richMedia) ficam em PascalCase; demais campos
    em snake_case profundo.
    """
    transformed: dict[str, Any] = {}
    for key, value in message.items():
        wire_key = snakecase(key)
        if wire_key in _PASCAL_CASE_FIELDS:
            transformed[wire_key] = pascalcase_keys_deep(value)
        else:
            transformed[wire_key] = snakecase_keys_deep(value)
    return transformed


def _to_coordinates(location: Mapping[str, Any] | Sequence[float]) -> dict[str, Any]:
    """Aceita {"lat", "lon"} ou (lat, lon)."""
    if isinstance(location, Mapping):
        return {"lat": location["lat"], "lon": location["lon"]}
    lat, lon = location
    return {"lat": lat, "lon": lon}


class ViberClient(HttpClient):
    """Cliente HTTP da Viber REST Bot API.

    Exemplo:
        client = ViberClient("AUTH_TOKEN", {"name": "Loja", "avatar": "https://..."})
        await client.send_text(user_id, "Olá")
    """

    platform_name = "Viber"

    def __init__(
        self,
        access_token_or_settings: str | ViberSettings,
        sender: Mapping[str, str] | None = None,
        *,
        origin: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        on_request: OnRequest | None = None,
    ) -> None:
        """Inicializa cliente Viber.

        Args:
            access_token_or_settings: Token do Public Account ou ViberSettings
            sender: Remetente {"name", "avatar"?}; padrão vem das settings
            origin: Origem alternativa da API (só com token)
            http_client: httpx.AsyncClient injetado
            on_request: Hook chamado antes de cada requisição

        Raises:
            ValueError: Token vazio ou remetente sem nome.
        """
        if isinstance(access_token_or_settings, ViberSettings):
            settings = access_token_or_settings
        else:
            settings = ViberSettings(
                auth_token=access_token_or_settings or "",
                api_origin=origin or VIBER_API_ORIGIN,
            )
        if not settings.auth_token or not settings.auth_token.strip():
            raise ValueError(
                "auth_token é obrigatório para o cliente Viber. "
                "Verifique se VIBER_AUTH_TOKEN está configurado."
            )
        resolved_sender = dict(sender) if sender is not None else settings.sender
        if not resolved_sender.get("name"):
            raise ValueError("sender.name é obrigatório para o cliente Viber")

        super().__init__(
            HttpClientConfig(
                base_url=settings.api_endpoint,
                timeout_seconds=settings.request_timeout_seconds,
                default_headers={"X-Viber-Auth-Token": settings.auth_token},
            ),
            http_client=http_client,
            on_request=on_request,
        )
        self._auth_token = settings.auth_token
        self._sender = resolved_sender

    @property
    def access_token(self) -> str:
        return self._auth_token

    @property
    def sender(self) -> dict[str, str]:
        return dict(self._sender)

    async def _call_api(self, path: str, body: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Chama a API e devolve o corpo em camelCase.

        Raises:
            HttpError: Erro HTTP/transporte ou status != 0 no envelope.
        """
        # Conversão rasa: keyboard/rich_media já chegam em PascalCase
        wire_body = snakecase_keys(compact(body or {}))
        response = await self.request("POST", path, body=wire_body)
        data = self._read_json(response, path)
        try:
            envelope = ViberEnvelope.model_validate(data)
        except ValidationError:
            self._raise_platform_error("Viber API - malformed response", response, path)
        if not envelope.ok:
            self._raise_platform_error(envelope.describe(), response, path)
        return to_idiomatic_case(data)

    # Webhooks

    async def set_webhook(
        self,
        url: str,
        event_types: Sequence[str] | None = None,
        *,
        send_name: bool | None = None,
        send_photo: bool | None = None,
    ) -> dict[str, Any]:
        """Registra webhook; retorna {"status", "statusMessage", "eventTypes"}."""
        return await self._call_api(
            "set_webhook",
            {
                "url": url,
                "event_types": list(event_types) if event_types is not None else None,
                "send_name": send_name,
                "send_photo": send_photo,
            },
        )

    async def remove_webhook(self) -> dict[str, Any]:
        return await self._call_api("set_webhook", {"url": ""})

    # Mensagens

    async def send_message(self, receiver: str, message: Mapping[str, Any]) -> dict[str, Any]:
        """Envia mensagem já montada ({"type": ..., ...}) para um usuário."""
        return await self._call_api(
            "send_message",
            {
                "receiver": receiver,
                "sender": self._sender,
                **transform_message_case(message),
            },
        )

    async def send_text(self, receiver: str, text: str, **options: Any) -> dict[str, Any]:
        """Texto simples; keyboard, tracking_data etc. via options."""
        return await self.send_message(receiver, {"type": "text", "text": text, **options})

    async def send_picture(
        self, receiver: str, picture: Mapping[str, Any], **options: Any
    ) -> dict[str, Any]:
        """Imagem: picture = {"text", "media", "thumbnail"?}."""
        return await self.send_message(receiver, {"type": "picture", **picture, **options})

    async def send_url(self, receiver: str, url: str, **options: Any) -> dict[str, Any]:
        return await self.send_message(receiver, {"type": "url", "media": url, **options})

    async def send_location(
        self,
        receiver: str,
        location: Mapping[str, Any] | Sequence[float],
        **options: Any,
    ) -> dict[str, Any]:
        """Localização; aceita {"lat", "lon"} ou tupla (lat, lon)."""
        return await self.send_message(
            receiver,
            {"type": "location", "location": _to_coordinates(location), **options},
        )

    async def send_rich_media(
        self, receiver: str, rich_media: Mapping[str, Any], **options: Any
    ) -> dict[str, Any]:
        """Carrossel (rich media); exige min_api_version >= 2."""
        return await self.send_message(
            receiver,
            {
                "type": "rich_media",
                "min_api_version": 2,
                "rich_media": rich_media,
                **options,
            },
        )

    async def broadcast_message(
        self, broadcast_list: Sequence[str], message: Mapping[str, Any]
    ) -> dict[str, Any]:
        """Envia a mesma mensagem para até 300 usuários."""
        return await self._call_api(
            "broadcast_message",
            {
                "broadcast_list": list(broadcast_list),
                "sender": self._sender,
                **transform_message_case(message),
            },
        )

    # Conta e usuários

    async def get_account_info(self) -> dict[str, Any]:
        return await self._call_api("get_account_info")

    async def get_user_details(self, user_id: str) -> dict[str, Any]:
        data = await self._call_api("get_user_details", {"id": user_id})
        return data["user"]

    async def get_online_status(self, ids: Sequence[str]) -> list[dict[str, Any]]:
        data = await self._call_api("get_online", {"ids": list(ids)})
        return data["users"]


def create_viber_client(
    settings: ViberSettings | None = None,
    **kwargs: Any,
) -> ViberClient:
    """Factory para criar cliente Viber a partir das settings.

    Args:
        settings: ViberSettings opcional. Se None, carrega do ambiente.
        **kwargs: Repassados ao construtor (sender, http_client, on_request).
    """
    from config.settings import get_viber_settings

    return ViberClient(settings or get_viber_settings(), **kwargs)
