"""Reescrita recursiva de chaves em valores estruturados (JSON-like).

Somente dicts (Mapping) e sequências (list/tuple) são percorridos.
Payloads binários (bytes, streams, UploadFile) são folhas opacas e
retornam com a mesma identidade. Nenhuma função muta a entrada.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import IO, Any

from utils.case.conversion import camelcase, pascalcase, snakecase

KeyConverter = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class UploadFile:
    """Anexo binário enviado via multipart (nunca percorrido pelo transcoder)."""

    content: bytes | IO[bytes]
    filename: str | None = None
    content_type: str | None = None


OPAQUE_TYPES: tuple[type, ...] = (bytes, bytearray, memoryview, io.IOBase, UploadFile)


def is_opaque(value: Any) -> bool:
    """Retorna True para payloads binários que não devem ser percorridos."""
    return isinstance(value, OPAQUE_TYPES)


def _map_keys(value: Any, convert: KeyConverter, deep: bool) -> Any:
    if is_opaque(value):
        return value
    if isinstance(value, Mapping):
        return {
            (convert(key) if isinstance(key, str) else key): (
                _map_keys(item, convert, deep) if deep else item
            )
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_map_keys(item, convert, deep) for item in value]
    if isinstance(value, tuple):
        return tuple(_map_keys(item, convert, deep) for item in value)
    return value


def snakecase_keys(value: Any, *, deep: bool = False) -> Any:
    """Converte chaves para snake_case (apenas o primeiro nível se deep=False)."""
    return _map_keys(value, snakecase, deep)


def camelcase_keys(value: Any, *, deep: bool = False) -> Any:
    """Converte chaves para camelCase (apenas o primeiro nível se deep=False)."""
    return _map_keys(value, camelcase, deep)


def pascalcase_keys(value: Any, *, deep: bool = False) -> Any:
    """Converte chaves para PascalCase (apenas o primeiro nível se deep=False)."""
    return _map_keys(value, pascalcase, deep)


def snakecase_keys_deep(value: Any) -> Any:
    return snakecase_keys(value, deep=True)


def camelcase_keys_deep(value: Any) -> Any:
    return camelcase_keys(value, deep=True)


def pascalcase_keys_deep(value: Any) -> Any:
    return pascalcase_keys(value, deep=True)


def to_wire_case(value: Any) -> Any:
    """Converte payload idiomático (camelCase) para o formato de wire (snake_case).

    Exemplo:
        to_wire_case({"quickReplies": [{"contentType": "text"}]})
        == {"quick_replies": [{"content_type": "text"}]}
    """
    return snakecase_keys_deep(value)


def to_idiomatic_case(value: Any) -> Any:
    """Converte resposta da plataforma (snake_case) para camelCase.

    Exemplo:
        to_idiomatic_case({"message_id": 1, "chat": {"first_name": "a"}})
        == {"messageId": 1, "chat": {"firstName": "a"}}
    """
    return camelcase_keys_deep(value)
