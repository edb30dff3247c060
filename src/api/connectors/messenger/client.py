"""Cliente da Messenger Platform (Graph API).

Requisições vão para https://graph.facebook.com/v<versão>/ com
access_token (e appsecret_proof, quando há app_secret) na query string.
Corpos são convertidos para snake_case e respostas para camelCase.
"""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from api.connectors.http_base import HttpClient, HttpClientConfig, OnRequest, compact
from api.connectors.messenger.models import parse_graph_error
from config.settings.messenger import MessengerSettings, extract_version
from utils.case import is_opaque, to_idiomatic_case, to_wire_case

if TYPE_CHECKING:
    import httpx

DEFAULT_USER_PROFILE_FIELDS = ("id", "name", "first_name", "last_name", "profile_pic")

Recipient = str | Mapping[str, Any]


def app_secret_proof(access_token: str, app_secret: str) -> str:
    """HMAC-SHA256 (hex) do access_token assinado com o app_secret."""
    return hmac.new(
        app_secret.encode("utf-8"),
        access_token.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def _to_recipient(psid_or_recipient: Recipient) -> dict[str, Any]:
    """PSID em string vira {"id": psid}; mappings passam como estão."""
    if isinstance(psid_or_recipient, str):
        return {"id": psid_or_recipient}
    return dict(psid_or_recipient)


def _media_attachment(media_type: str, media: str | Mapping[str, Any]) -> dict[str, Any]:
    """URL em string vira payload {"url": ...}; mappings são o próprio payload."""
    payload = {"url": media} if isinstance(media, str) else dict(media)
    return {"type": media_type, "payload": payload}


class MessengerClient(HttpClient):
    """Cliente HTTP da Messenger Platform.

    Exemplo:
        client = MessengerClient("PAGE_TOKEN", app_secret="APP_SECRET")
        await client.send_text(psid, "Olá", quick_replies=[...])
    """

    platform_name = "Messenger"

    def __init__(
        self,
        access_token_or_settings: str | MessengerSettings,
        *,
        app_id: str | None = None,
        app_secret: str | None = None,
        version: str | None = None,
        origin: str | None = None,
        skip_app_secret_proof: bool | None = None,
        http_client: httpx.AsyncClient | None = None,
        on_request: OnRequest | None = None,
    ) -> None:
        """Inicializa cliente Messenger.

        Args:
            access_token_or_settings: Token da página ou MessengerSettings
            app_id: ID do app Meta
            app_secret: Secret do app (habilita appsecret_proof)
            version: Versão da Graph API ("6.0" ou "v6.0")
            origin: Origem alternativa da Graph API
            skip_app_secret_proof: Força envio (False) ou omissão (True) do proof
            http_client: httpx.AsyncClient injetado
            on_request: Hook chamado antes de cada requisição

        Raises:
            ValueError: Token vazio, versão inválida ou proof exigido sem app_secret.
        """
        if isinstance(access_token_or_settings, MessengerSettings):
            settings = access_token_or_settings
        else:
            settings = MessengerSettings(access_token=access_token_or_settings or "")
        overrides = compact(
            {
                "app_id": app_id,
                "app_secret": app_secret,
                "api_version": version,
                "api_origin": origin,
                "skip_app_secret_proof": skip_app_secret_proof,
            }
        )
        if overrides:
            settings = replace(settings, **overrides)

        if not settings.access_token or not settings.access_token.strip():
            raise ValueError(
                "access_token é obrigatório para o cliente Messenger. "
                "Verifique se MESSENGER_ACCESS_TOKEN está configurado."
            )

        skip_proof = settings.skip_app_secret_proof
        if skip_proof is None:
            skip_proof = not settings.app_secret
        if not skip_proof and not settings.app_secret:
            raise ValueError("app_secret é obrigatório quando skip_app_secret_proof é False")

        params = {"access_token": settings.access_token}
        if not skip_proof:
            params["appsecret_proof"] = app_secret_proof(
                settings.access_token, settings.app_secret
            )

        super().__init__(
            HttpClientConfig(
                base_url=settings.api_endpoint,
                timeout_seconds=settings.request_timeout_seconds,
                default_params=params,
            ),
            http_client=http_client,
            on_request=on_request,
        )
        self._settings = settings

    @property
    def access_token(self) -> str:
        return self._settings.access_token

    @property
    def app_id(self) -> str:
        return self._settings.app_id

    @property
    def version(self) -> str:
        return extract_version(self._settings.api_version)

    def _describe_error(self, response: httpx.Response) -> str:
        try:
            graph_error = parse_graph_error(response.json())
        except ValueError:
            graph_error = None
        if graph_error is None:
            return super()._describe_error(response)
        return graph_error.describe()

    async def _call(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Executa chamada na Graph API e devolve o corpo em camelCase."""
        wire_body = to_wire_case(body) if body is not None else None
        response = await self.request(method, path, body=wire_body, params=params)
        data = self._read_json(response, path)
        graph_error = parse_graph_error(data)
        if graph_error is not None:
            self._raise_platform_error(graph_error.describe(), response, path)
        return to_idiomatic_case(data)

    # Page / perfil de usuário

    async def get_page_info(self, fields: Sequence[str] | None = None) -> dict[str, Any]:
        params = {"fields": ",".join(fields)} if fields else None
        return await self._call("GET", "me", params=params)

    async def get_user_profile(
        self,
        user_id: str,
        fields: Sequence[str] = DEFAULT_USER_PROFILE_FIELDS,
    ) -> dict[str, Any]:
        return await self._call("GET", user_id, params={"fields": ",".join(fields)})

    # Messenger Profile

    async def get_messenger_profile(self, fields: Sequence[str]) -> list[dict[str, Any]]:
        result = await self._call(
            "GET", "me/messenger_profile", params={"fields": ",".join(fields)}
        )
        return result.get("data", [])

    async def set_messenger_profile(self, profile: Mapping[str, Any]) -> dict[str, Any]:
        return await self._call("POST", "me/messenger_profile", body=profile)

    async def delete_messenger_profile(self, fields: Sequence[str]) -> dict[str, Any]:
        return await self._call("DELETE", "me/messenger_profile", body={"fields": list(fields)})

    async def get_get_started(self) -> dict[str, Any] | None:
        profiles = await self.get_messenger_profile(["get_started"])
        return profiles[0].get("getStarted") if profiles else None

    async def set_get_started(self, payload: str) -> dict[str, Any]:
        return await self.set_messenger_profile({"getStarted": {"payload": payload}})

    async def delete_get_started(self) -> dict[str, Any]:
        return await self.delete_messenger_profile(["get_started"])

    async def get_greeting(self) -> list[dict[str, Any]] | None:
        profiles = await self.get_messenger_profile(["greeting"])
        return profiles[0].get("greeting") if profiles else None

    async def set_greeting(self, greeting: str | Sequence[Mapping[str, Any]]) -> dict[str, Any]:
        """Aceita texto único (locale default) ou lista [{"locale", "text"}]."""
        if isinstance(greeting, str):
            greeting = [{"locale": "default", "text": greeting}]
        return await self.set_messenger_profile({"greeting": list(greeting)})

    async def delete_greeting(self) -> dict[str, Any]:
        return await self.delete_messenger_profile(["greeting"])

    # Send API

    async def send_raw_body(self, body: Mapping[str, Any]) -> dict[str, Any]:
        """POST direto em me/messages (corpo em camelCase ou snake_case)."""
        return await self._call("POST", "me/messages", body=body)

    async def send_message(
        self,
        psid_or_recipient: Recipient,
        message: Mapping[str, Any],
        *,
        messaging_type: str | None = None,
        tag: str | None = None,
        quick_replies: Sequence[Mapping[str, Any]] | None = None,
        **options: Any,
    ) -> dict[str, Any]:
        """Envia mensagem; messaging_type padrão UPDATE (MESSAGE_TAG se houver tag)."""
        message_body = dict(message)
        if quick_replies:
            message_body["quick_replies"] = list(quick_replies)
        return await self.send_raw_body(
            compact(
                {
                    "messaging_type": messaging_type or ("MESSAGE_TAG" if tag else "UPDATE"),
                    "recipient": _to_recipient(psid_or_recipient),
                    "message": message_body,
                    "tag": tag,
                    **options,
                }
            )
        )

    async def send_text(
        self, psid_or_recipient: Recipient, text: str, **options: Any
    ) -> dict[str, Any]:
        return await self.send_message(psid_or_recipient, {"text": text}, **options)

    async def send_attachment(
        self,
        psid_or_recipient: Recipient,
        attachment: Mapping[str, Any],
        **options: Any,
    ) -> dict[str, Any]:
        return await self.send_message(
            psid_or_recipient, {"attachment": dict(attachment)}, **options
        )

    async def _send_media(
        self,
        media_type: str,
        psid_or_recipient: Recipient,
        media: Any,
        **options: Any,
    ) -> dict[str, Any]:
        if is_opaque(media):
            # Upload multipart: anexo vai no campo filedata
            return await self.send_attachment(
                psid_or_recipient,
                {"type": media_type, "payload": {}},
                filedata=media,
                **options,
            )
        return await self.send_attachment(
            psid_or_recipient, _media_attachment(media_type, media), **options
        )

    async def send_image(
        self, psid_or_recipient: Recipient, image: Any, **options: Any
    ) -> dict[str, Any]:
        """Imagem por URL, payload ({"attachment_id": ...}) ou binário."""
        return await self._send_media("image", psid_or_recipient, image, **options)

    async def send_audio(
        self, psid_or_recipient: Recipient, audio: Any, **options: Any
    ) -> dict[str, Any]:
        return await self._send_media("audio", psid_or_recipient, audio, **options)

    async def send_video(
        self, psid_or_recipient: Recipient, video: Any, **options: Any
    ) -> dict[str, Any]:
        return await self._send_media("video", psid_or_recipient, video, **options)

    async def send_file(
        self, psid_or_recipient: Recipient, file: Any, **options: Any
    ) -> dict[str, Any]:
        return await self._send_media("file", psid_or_recipient, file, **options)

    async def send_sender_action(
        self, psid_or_recipient: Recipient, sender_action: str
    ) -> dict[str, Any]:
        return await self.send_raw_body(
            {"recipient": _to_recipient(psid_or_recipient), "sender_action": sender_action}
        )

    async def mark_seen(self, psid_or_recipient: Recipient) -> dict[str, Any]:
        return await self.send_sender_action(psid_or_recipient, "mark_seen")

    async def typing_on(self, psid_or_recipient: Recipient) -> dict[str, Any]:
        return await self.send_sender_action(psid_or_recipient, "typing_on")

    async def typing_off(self, psid_or_recipient: Recipient) -> dict[str, Any]:
        return await self.send_sender_action(psid_or_recipient, "typing_off")


def create_messenger_client(
    settings: MessengerSettings | None = None,
    **kwargs: Any,
) -> MessengerClient:
    """Factory para criar cliente Messenger a partir das settings.

    Args:
        settings: MessengerSettings opcional. Se None, carrega do ambiente.
        **kwargs: Repassados ao construtor (http_client, on_request, ...).
    """
    from config.settings import get_messenger_settings

    return MessengerClient(settings or get_messenger_settings(), **kwargs)
