"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="my_bot")
    logger = get_logger(__name__)
    logger.info("viber_send_ok", extra={"endpoint": "/send_message"})

Campos em todo log: service, environment, request_id, level, logger,
message, asctime. Tokens de acesso nunca são logados.
"""

from config.logging.config import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)
from config.logging.filters import ServiceContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "ServiceContextFilter",
    "configure_logging",
    "configure_logging_from_settings",
    "create_json_formatter",
    "get_logger",
]
