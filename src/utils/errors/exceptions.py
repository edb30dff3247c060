"""Erro HTTP uniforme para todos os clientes de plataforma.

Formas de construção:
    HttpError(exc)                                    # exceção da camada HTTP
    HttpError("Telegram API - 404 Not Found", exc)    # mensagem + exceção
    HttpError("Viber API - bad", {"request": req, "response": resp})
    HttpError("read ECONNRESET")                      # sem contexto
"""

from __future__ import annotations

import traceback
from collections.abc import Mapping
from typing import Any

from utils.errors.diagnostics import field, indent, render_request, render_response

_CONTEXT_KEYS = ("config", "request", "response")


def _read_context(source: Any) -> dict[str, Any]:
    """Extrai config/request/response de um mapping ou de uma exceção."""
    if source is None:
        return {}
    return {key: field(source, key) for key in _CONTEXT_KEYS}


def _numeric_status(response: Any) -> int | None:
    if response is None:
        return None
    status = field(response, "status_code", "status")
    if isinstance(status, int) and not isinstance(status, bool):
        return status
    return None


class HttpError(Exception):
    """Falha de chamada HTTP (status não-2xx, erro de transporte ou envelope de erro).

    Imutável após construção. `render()` produz o diagnóstico multi-linha
    usado em logs; `str(error)` é sempre a mensagem.
    """

    def __init__(
        self,
        message_or_error: str | BaseException,
        context: BaseException | Mapping[str, Any] | None = None,
    ) -> None:
        if isinstance(message_or_error, BaseException):
            source: Any = message_or_error if context is None else context
            message = str(message_or_error) or type(message_or_error).__name__
        else:
            source = context
            message = message_or_error
        super().__init__(message)
        ctx = _read_context(source)
        self._message = message
        self._config = ctx.get("config")
        self._request = ctx.get("request")
        self._response = ctx.get("response")
        self._status = _numeric_status(self._response)

    @property
    def message(self) -> str:
        return self._message

    @property
    def status(self) -> int | None:
        """Status HTTP numérico; None quando não houve response."""
        return self._status

    @property
    def config(self) -> Any:
        return self._config

    @property
    def request(self) -> Any:
        return self._request

    @property
    def response(self) -> Any:
        return self._response

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message!r}, status={self._status!r})"

    def _header(self) -> str:
        if self.__traceback__ is not None:
            try:
                return "".join(
                    traceback.format_exception(type(self), self, self.__traceback__)
                ).rstrip()
            except Exception:  # noqa: BLE001 - diagnóstico nunca pode falhar
                pass
        return f"{type(self).__name__}: {self._message}"

    def render(self) -> str:
        """Diagnóstico legível: header, mensagem, seção Request e seção Response."""
        try:
            request_section = render_request(self._config, self._request)
        except Exception:  # noqa: BLE001 - diagnóstico nunca pode falhar
            request_section = ""
        try:
            response_section = render_response(self._response)
        except Exception:  # noqa: BLE001 - diagnóstico nunca pode falhar
            response_section = ""
        return "\n".join(
            [
                "",
                self._header(),
                "",
                "Error Message -",
                indent(self._message),
                request_section,
                response_section,
                "",
            ]
        )

    def to_log_extra(self) -> dict[str, Any]:
        """Campos para logging estruturado (sem URL, tokens ou payloads)."""
        source = self._config if self._config is not None else self._request
        method = field(source, "method") if source is not None else None
        return {
            "status": self._status,
            "method": str(method).upper() if method else None,
        }
