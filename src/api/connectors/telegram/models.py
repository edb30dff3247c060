"""Envelope de resposta da Telegram Bot API (validado na borda)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class TelegramEnvelope(BaseModel):
    """Toda resposta da Bot API: {"ok": bool, "result"?, "description"?, "error_code"?}."""

    model_config = ConfigDict(extra="allow")

    ok: bool = False
    result: Any = None
    description: str | None = None
    error_code: int | None = None

    def error_message(self, *, with_code: bool) -> str:
        """Mensagem no formato "Telegram API - <code> <description>"."""
        parts = []
        if with_code and self.error_code is not None:
            parts.append(str(self.error_code))
        if self.description:
            parts.append(self.description)
        return f"Telegram API - {' '.join(parts)}".rstrip()
