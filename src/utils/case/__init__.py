"""Transcoder de casing de chaves (camelCase <-> snake_case).

Uso:
    from utils.case import to_idiomatic_case, to_wire_case

    body = to_wire_case({"chatId": 1, "replyMarkup": {"inlineKeyboard": []}})
    result = to_idiomatic_case(response.json()["result"])
"""

from utils.case.conversion import camelcase, pascalcase, snakecase
from utils.case.keys import (
    OPAQUE_TYPES,
    UploadFile,
    camelcase_keys,
    camelcase_keys_deep,
    is_opaque,
    pascalcase_keys,
    pascalcase_keys_deep,
    snakecase_keys,
    snakecase_keys_deep,
    to_idiomatic_case,
    to_wire_case,
)

__all__ = [
    "OPAQUE_TYPES",
    "UploadFile",
    "camelcase",
    "camelcase_keys",
    "camelcase_keys_deep",
    "is_opaque",
    "pascalcase",
    "pascalcase_keys",
    "pascalcase_keys_deep",
    "snakecase",
    "snakecase_keys",
    "snakecase_keys_deep",
    "to_idiomatic_case",
    "to_wire_case",
]
