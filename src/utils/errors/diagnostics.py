"""Renderização do diagnóstico textual de HttpError.

Aceita descritores httpx (Request/Response) ou mappings simples. Nenhuma
função aqui levanta exceção: dados malformados caem no texto bruto.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import httpx

_MISSING = object()


def indent(text: str) -> str:
    """Indenta cada linha não vazia com dois espaços."""
    return "\n".join(f"  {line}" if line else "" for line in text.split("\n"))


def pretty_json(data: Any) -> str:
    """Serializa com indentação; objetos não serializáveis viram str()."""
    try:
        return json.dumps(data, indent=2, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return str(data)


def field(source: Any, *names: str) -> Any:
    """Lê o primeiro campo presente (chave de mapping ou atributo)."""
    for name in names:
        if isinstance(source, Mapping):
            if name in source:
                return source[name]
            continue
        try:
            value = getattr(source, name, _MISSING)
        except (httpx.RequestNotRead, httpx.ResponseNotRead, RuntimeError):
            continue
        if value is not _MISSING:
            return value
    return None


def decode_body(body: Any) -> Any:
    """Tenta interpretar um corpo como JSON; senão retorna o texto bruto."""
    if body is None:
        return None
    if isinstance(body, (bytes, bytearray, memoryview)):
        raw = bytes(body)
        if not raw:
            return None
        try:
            body = raw.decode("utf-8")
        except UnicodeDecodeError:
            return f"<{len(raw)} bytes>"
    if isinstance(body, str):
        if not body:
            return None
        try:
            return json.loads(body)
        except ValueError:
            return body
    return body


def request_body(config: Any, request: Any) -> Any:
    """Corpo da requisição: config.data tem prioridade sobre request.content."""
    for source, names in ((config, ("data", "body")), (request, ("content", "data", "body"))):
        if source is None:
            continue
        body = decode_body(field(source, *names))
        if body is not None:
            return body
    return None


def response_body(response: Any) -> Any:
    if isinstance(response, httpx.Response):
        try:
            return decode_body(response.content)
        except httpx.ResponseNotRead:
            return None
    return decode_body(field(response, "data", "body", "content"))


def render_request(config: Any, request: Any) -> str:
    source = config if config is not None else request
    if source is None:
        return ""
    method = field(source, "method") or field(request, "method") or ""
    url = field(source, "url") or field(request, "url") or ""
    lines = ["Request -", f"  {str(method).upper()} {url}".rstrip()]
    body = request_body(config, request)
    if body is not None:
        lines.extend(["Request Data -", indent(pretty_json(body))])
    return "\n".join(lines)


def render_response(response: Any) -> str:
    if response is None:
        return ""
    status = field(response, "status_code", "status")
    status_text = field(response, "reason_phrase", "status_text", "statusText")
    head = " ".join(str(part) for part in (status, status_text) if part not in (None, ""))
    lines = ["Response -", f"  {head}".rstrip()]
    body = response_body(response)
    if body is not None:
        lines.extend(["Response Data -", indent(pretty_json(body))])
    return "\n".join(lines)
