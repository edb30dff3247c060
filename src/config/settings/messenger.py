"""Settings específicas de Messenger.

Configurações do cliente da Messenger Platform via Graph API (Meta).
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache

GRAPH_API_VERSION: str = "6.0"
GRAPH_API_ORIGIN: str = "https://graph.facebook.com"

_VERSION_PATTERN = re.compile(r"^v?(\d+\.\d+)$")


def extract_version(version: str) -> str:
    """Normaliza versão da Graph API ("v6.0" ou "6.0" -> "6.0").

    Raises:
        ValueError: Se a versão não está no formato <major>.<minor>.
    """
    match = _VERSION_PATTERN.match(version.strip())
    if not match:
        raise ValueError(f"Versão da Graph API inválida: {version}")
    return match.group(1)


@dataclass(frozen=True)
class MessengerSettings:
    """Configurações do cliente Messenger.

    Attributes:
        access_token: Token de acesso da página
        app_id: ID do app Meta
        app_secret: Secret do app (usado no appsecret_proof)
        api_version: Versão da Graph API (ex: 6.0)
        api_origin: Origem da Graph API
        skip_app_secret_proof: Não enviar appsecret_proof (None = decide pelo app_secret)
        request_timeout_seconds: Timeout para requisições HTTP
    """

    access_token: str = ""
    app_id: str = ""
    app_secret: str = ""
    api_version: str = GRAPH_API_VERSION
    api_origin: str = GRAPH_API_ORIGIN
    skip_app_secret_proof: bool | None = None
    request_timeout_seconds: float = 30.0

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_origin.rstrip('/')}/v{extract_version(self.api_version)}/"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Messenger."""
        errors: list[str] = []
        if not self.access_token:
            errors.append("MESSENGER_ACCESS_TOKEN não configurado")
        if not _VERSION_PATTERN.match(self.api_version.strip()):
            errors.append(f"MESSENGER_API_VERSION inválida: {self.api_version}")
        if self.skip_app_secret_proof is False and not self.app_secret:
            errors.append("MESSENGER_APP_SECRET é obrigatório sem skip_app_secret_proof")
        if self.request_timeout_seconds <= 0:
            errors.append("MESSENGER_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _parse_optional_bool(value: str | None) -> bool | None:
    if value is None or not value.strip():
        return None
    return value.strip().lower() in ("true", "1", "yes")


def _load_from_env() -> MessengerSettings:
    """Carrega MessengerSettings de variáveis de ambiente."""
    return MessengerSettings(
        access_token=os.getenv("MESSENGER_ACCESS_TOKEN", ""),
        app_id=os.getenv("MESSENGER_APP_ID", ""),
        app_secret=os.getenv("MESSENGER_APP_SECRET", ""),
        api_version=os.getenv("MESSENGER_API_VERSION", GRAPH_API_VERSION),
        api_origin=os.getenv("MESSENGER_API_ORIGIN", GRAPH_API_ORIGIN),
        skip_app_secret_proof=_parse_optional_bool(
            os.getenv("MESSENGER_SKIP_APP_SECRET_PROOF")
        ),
        request_timeout_seconds=float(
            os.getenv("MESSENGER_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_messenger_settings() -> MessengerSettings:
    """Retorna instância cacheada de MessengerSettings."""
    return _load_from_env()
