"""Cliente HTTP base para os conectores de plataforma.

Cada conector (Telegram, Messenger, Viber) estende HttpClient e define:
- `platform_name`: prefixo das mensagens de erro ("Telegram API - ...")
- `_describe_error`: mensagem a partir de uma response não-2xx

Sem retry/backoff: cada chamada pública resulta em exatamente uma requisição.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, NoReturn

import httpx

from api.connectors.http_logging import (
    RequestPayload,
    default_on_request,
    log_api_error,
    log_success,
)
from utils.case import UploadFile, is_opaque
from utils.errors import HttpError

logger = logging.getLogger(__name__)

OnRequest = Callable[[RequestPayload], None]


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    base_url: str = ""
    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    default_params: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


def _form_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _file_field(name: str, value: Any) -> Any:
    if isinstance(value, UploadFile):
        content = value.content
        if isinstance(content, (bytearray, memoryview)):
            content = bytes(content)
        if value.content_type:
            return (value.filename or name, content, value.content_type)
        return (value.filename or name, content)
    if isinstance(value, (bytearray, memoryview)):
        return (name, bytes(value))
    return (name, value)


def build_body_kwargs(body: Any) -> dict[str, Any]:
    """Monta kwargs do httpx: JSON, ou multipart quando há payload binário no topo."""
    if body is None:
        return {}
    if isinstance(body, Mapping) and any(is_opaque(value) for value in body.values()):
        data: dict[str, str] = {}
        files: dict[str, Any] = {}
        for key, value in body.items():
            if is_opaque(value):
                files[key] = _file_field(key, value)
            elif value is not None:
                data[key] = _form_value(value)
        return {"data": data, "files": files}
    return {"json": body}


def compact(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Remove opções não informadas (None) do primeiro nível do corpo."""
    return {key: value for key, value in mapping.items() if value is not None}


class HttpClient:
    """Cliente HTTP assíncrono com normalização de erros em HttpError.

    O httpx.AsyncClient é criado sob demanda (ou injetado) e pertence à
    instância; use `async with` ou `aclose()` para liberar conexões.
    """

    platform_name: str = "HTTP"

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        on_request: OnRequest | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._on_request = on_request or default_on_request

    @property
    def base_url(self) -> str:
        return self._config.base_url

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Obtém ou cria cliente HTTP."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self._config.timeout_seconds,
                verify=self._config.verify_ssl,
            )
        return self._http_client

    async def aclose(self) -> None:
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _build_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        base = self._config.base_url
        if not base:
            return path
        return f"{base.rstrip('/')}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Executa uma requisição; status não-2xx e falhas de rede viram HttpError.

        Args:
            method: Método HTTP
            path: Endpoint relativo à base_url (ou URL absoluta)
            body: Corpo já em wire case (JSON ou multipart)
            params: Query string adicional
            headers: Headers adicionais

        Raises:
            HttpError: Erro de transporte ou status não-2xx.
        """
        method = method.upper()
        url = self._build_url(path)
        merged_headers = {**self._config.default_headers, **(headers or {})}
        merged_params = {**self._config.default_params, **(params or {})}

        self._on_request(
            RequestPayload(
                method=method,
                url=url,
                endpoint=path,
                headers=merged_headers,
                body=body,
            )
        )

        client = await self._get_http_client()
        try:
            response = await client.request(
                method,
                url,
                params=merged_params or None,
                headers=merged_headers,
                timeout=self._config.timeout_seconds,
                **build_body_kwargs(body),
            )
        except httpx.RequestError as exc:
            error = HttpError(exc)
            log_api_error(self.platform_name, error, path)
            raise error from exc

        if response.is_error:
            error = HttpError(
                self._describe_error(response),
                {"request": response.request, "response": response},
            )
            log_api_error(self.platform_name, error, path)
            raise error

        log_success(self.platform_name, method, path, response.status_code)
        return response

    def _describe_error(self, response: httpx.Response) -> str:
        """Mensagem para status não-2xx; conectores sobrescrevem com o envelope da plataforma."""
        return f"{self.platform_name} API - {response.status_code} {response.reason_phrase}"

    def _raise_platform_error(
        self, message: str, response: httpx.Response, path: str
    ) -> NoReturn:
        """Levanta HttpError para erro reportado no corpo de uma response 2xx."""
        error = HttpError(message, {"request": response.request, "response": response})
        log_api_error(self.platform_name, error, path)
        raise error

    def _read_json(self, response: httpx.Response, path: str) -> Any:
        """Decodifica o corpo JSON; corpo inválido vira HttpError."""
        try:
            return response.json()
        except ValueError as exc:
            logger.error(
                "http_invalid_json",
                extra={"platform": self.platform_name, "endpoint": path},
            )
            error = HttpError(
                f"{self.platform_name} API - invalid JSON response",
                {"request": response.request, "response": response},
            )
            raise error from exc
