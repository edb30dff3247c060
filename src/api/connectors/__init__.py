"""Connectors por plataforma — clientes HTTP finos para APIs de mensageria.

Estrutura:
- http_base.py: HttpClient (httpx) compartilhado, normaliza falhas em HttpError
- http_logging.py: hook on_request padrão e logs sem tokens
- telegram/: Telegram Bot API
- messenger/: Messenger Platform (Graph API)
- viber/: Viber REST Bot API

Cada plataforma tem seu próprio connector; todas levantam apenas HttpError.
"""

from .http_base import HttpClient, HttpClientConfig
from .http_logging import RequestPayload, default_on_request

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "RequestPayload",
    "default_on_request",
]
