"""Envelope de resposta da Viber REST Bot API (validado na borda)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# Viber sempre responde HTTP 200; sucesso é status == 0 no corpo
VIBER_STATUS_OK = 0


class ViberEnvelope(BaseModel):
    """Campos comuns a todas as respostas: status e status_message."""

    model_config = ConfigDict(extra="allow")

    status: int
    status_message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == VIBER_STATUS_OK

    def describe(self) -> str:
        return f"Viber API - {self.status_message}".rstrip()
