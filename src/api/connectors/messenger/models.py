"""Envelope de erro da Graph API (validado na borda)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError


class GraphApiError(BaseModel):
    """Objeto `error` retornado pela Graph API."""

    model_config = ConfigDict(extra="allow")

    code: int | None = None
    type: str | None = None
    message: str | None = None
    error_subcode: int | None = None
    fbtrace_id: str | None = None

    def describe(self) -> str:
        """Mensagem no formato "Messenger API - <code> <type> <message>"."""
        parts = [str(part) for part in (self.code, self.type, self.message) if part is not None]
        return f"Messenger API - {' '.join(parts)}".rstrip()


def parse_graph_error(response_data: Any) -> GraphApiError | None:
    """Extrai o erro da Graph API de um corpo JSON.

    Returns:
        GraphApiError se houver erro, None se sucesso ou corpo irreconhecível.
    """
    if not isinstance(response_data, dict):
        return None
    error_obj = response_data.get("error")
    if not error_obj or not isinstance(error_obj, dict):
        return None
    try:
        return GraphApiError.model_validate(error_obj)
    except ValidationError:
        return None
