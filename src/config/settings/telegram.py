"""Settings específicas de Telegram.

Configurações do cliente da Telegram Bot API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

TELEGRAM_API_ORIGIN: str = "https://api.telegram.org"


@dataclass(frozen=True)
class TelegramSettings:
    """Configurações do cliente Telegram.

    Attributes:
        access_token: Token do bot (obtido via @BotFather)
        api_origin: Origem da Bot API (permite servidor local da Bot API)
        request_timeout_seconds: Timeout para requisições HTTP
    """

    access_token: str = ""
    api_origin: str = TELEGRAM_API_ORIGIN
    request_timeout_seconds: float = 30.0

    @property
    def api_endpoint(self) -> str:
        """URL base da API com o token do bot."""
        if not self.access_token:
            raise ValueError("access_token é obrigatório")
        return f"{self.api_origin.rstrip('/')}/bot{self.access_token}/"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Telegram."""
        errors: list[str] = []
        if not self.access_token:
            errors.append("TELEGRAM_ACCESS_TOKEN não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("TELEGRAM_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> TelegramSettings:
    """Carrega TelegramSettings de variáveis de ambiente."""
    return TelegramSettings(
        access_token=os.getenv("TELEGRAM_ACCESS_TOKEN", ""),
        api_origin=os.getenv("TELEGRAM_API_ORIGIN", TELEGRAM_API_ORIGIN),
        request_timeout_seconds=float(
            os.getenv("TELEGRAM_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_telegram_settings() -> TelegramSettings:
    """Retorna instância cacheada de TelegramSettings."""
    return _load_from_env()
