"""Helpers de logging para chamadas às APIs de plataforma (sem tokens/PII).

Logs nunca incluem URL completa (o token do Telegram fica no path base),
headers ou corpo de mensagens; apenas método, endpoint relativo e status.
Hooks on_request customizados recebem RequestPayload com url e headers
completos e são responsáveis por não registrá-los.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from utils.case import is_opaque

if TYPE_CHECKING:
    from utils.errors import HttpError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestPayload:
    """Descrição de uma requisição de saída, entregue ao hook on_request.

    Attributes:
        method: Método HTTP
        url: URL absoluta; contém credenciais (token do Telegram no path)
        endpoint: Caminho relativo à base, sem credenciais; use este nos logs
        headers: Headers da requisição (X-Viber-Auth-Token incluso)
        body: Corpo em wire case
    """

    method: str
    url: str
    endpoint: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None


def describe_body(body: Any) -> str:
    """Resumo do formato do corpo (nunca o conteúdo)."""
    if body is None:
        return "empty"
    if is_opaque(body):
        return "binary"
    if isinstance(body, Mapping):
        if any(is_opaque(value) for value in body.values()):
            return "multipart"
        return "json"
    return type(body).__name__


def default_on_request(request: RequestPayload) -> None:
    """Hook padrão: loga a requisição de saída em DEBUG."""
    extra: dict[str, Any] = {
        "method": request.method,
        "endpoint": request.endpoint,
        "body_format": describe_body(request.body),
    }
    if isinstance(request.body, Mapping):
        extra["body_keys"] = sorted(str(key) for key in request.body)
    logger.debug("http_request", extra=extra)


def log_api_error(platform: str, error: HttpError, endpoint: str) -> None:
    """Loga falha de chamada (HTTP, transporte ou envelope de erro)."""
    logger.warning(
        "http_api_error",
        extra={
            "platform": platform,
            "endpoint": endpoint,
            "error_message": error.message,
            **error.to_log_extra(),
        },
    )


def log_success(platform: str, method: str, endpoint: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "http_api_ok",
        extra={
            "platform": platform,
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
