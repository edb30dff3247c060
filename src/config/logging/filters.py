"""Filters de logging para injeção de contexto.

Campos injetados em todo record:
- service: nome do serviço/aplicação que usa os clientes
- environment: ambiente de execução (development|staging|production)
- request_id: ID da chamada em andamento (quando houver getter)

Importante: nunca adicionar tokens de acesso ou payloads brutos nos logs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class ServiceContextFilter(logging.Filter):
    """Injeta service, environment e request_id em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        environment: Ambiente de execução.
        request_id_getter: Função que retorna o request_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        environment: str = "development",
        request_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._environment = environment
        self._get_request_id = request_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; request_id passado via `extra` é preservado."""
        existing = getattr(record, "request_id", None)
        record.request_id = existing if existing else self._get_request_id()
        record.service = self._service_name
        record.environment = self._environment
        return True
