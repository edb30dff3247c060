"""Settings específicas de Viber.

Configurações do cliente da Viber REST Bot API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

VIBER_API_ORIGIN: str = "https://chatapi.viber.com"


@dataclass(frozen=True)
class ViberSettings:
    """Configurações do cliente Viber.

    Attributes:
        auth_token: Token do Public Account (header X-Viber-Auth-Token)
        sender_name: Nome exibido como remetente
        sender_avatar: URL do avatar do remetente (opcional)
        api_origin: Origem da API
        request_timeout_seconds: Timeout para requisições HTTP
    """

    auth_token: str = ""
    sender_name: str = ""
    sender_avatar: str = ""
    api_origin: str = VIBER_API_ORIGIN
    request_timeout_seconds: float = 30.0

    @property
    def api_endpoint(self) -> str:
        """URL base da API."""
        return f"{self.api_origin.rstrip('/')}/pa/"

    @property
    def sender(self) -> dict[str, str]:
        """Remetente no formato da API (avatar só quando configurado)."""
        sender = {"name": self.sender_name}
        if self.sender_avatar:
            sender["avatar"] = self.sender_avatar
        return sender

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Viber."""
        errors: list[str] = []
        if not self.auth_token:
            errors.append("VIBER_AUTH_TOKEN não configurado")
        if not self.sender_name:
            errors.append("VIBER_SENDER_NAME não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("VIBER_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> ViberSettings:
    """Carrega ViberSettings de variáveis de ambiente."""
    return ViberSettings(
        auth_token=os.getenv("VIBER_AUTH_TOKEN", ""),
        sender_name=os.getenv("VIBER_SENDER_NAME", ""),
        sender_avatar=os.getenv("VIBER_SENDER_AVATAR", ""),
        api_origin=os.getenv("VIBER_API_ORIGIN", VIBER_API_ORIGIN),
        request_timeout_seconds=float(
            os.getenv("VIBER_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_viber_settings() -> ViberSettings:
    """Retorna instância cacheada de ViberSettings."""
    return _load_from_env()
