"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, na inicialização da aplicação que usa os clientes
    configure_logging(level="INFO", service_name="my_bot")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("telegram_send_ok", extra={"endpoint": "/sendMessage"})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import ServiceContextFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

    from config.settings.base import BaseSettings

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "messaging_apis"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    environment: str = "development",
    request_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no root logger.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        environment: Ambiente de execução.
        request_id_getter: Função opcional que retorna o request_id
            do contexto atual (ex: de uma ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(ServiceContextFilter(service_name, environment, request_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def configure_logging_from_settings(
    settings: BaseSettings,
    request_id_getter: Callable[[], str] | None = None,
) -> None:
    """Atalho que lê nível, serviço e ambiente de BaseSettings."""
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        environment=settings.environment,
        request_id_getter=request_id_getter,
    )


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)
