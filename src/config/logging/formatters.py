"""Formatters de logging estruturado (JSON via python-json-logger)."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
    "environment",
    "request_id",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "WARNING",
            "logger": "api.connectors.telegram.client",
            "message": "telegram_api_error",
            "service": "messaging_apis",
            "environment": "production",
            "request_id": "",
            "status": 404
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
