"""Conversão de chaves individuais entre camelCase, snake_case e PascalCase.

Regra de separação de palavras (a mesma nos dois sentidos):
- minúscula ou dígito seguido de maiúscula inicia palavra (fooBar, a1B)
- em sequência de maiúsculas, a última inicia palavra quando seguida
  de minúscula (XMLHttp -> xml_http); sequência final é uma palavra só
  (userID -> user_id)
- letra seguida de dígito inicia palavra (has2fa -> has_2fa); dígitos
  ficam colados às letras seguintes
- no sentido camel, palavra iniciada por dígito é colada à anterior
  (has_2fa -> has2fa)

Underscores nas pontas são preservados. Chaves com caracteres fora de
[A-Za-z0-9_] (ex: "Content-Type", "en-US") passam sem alteração.

Limitações aceitas (não inversíveis): acrônimos (userID -> user_id -> userId),
chaves com casing misto (foo_Bar -> foo_bar) e underscores repetidos no
meio da chave (foo__bar -> fooBar).
"""

from __future__ import annotations

import re

_CONVERTIBLE_KEY = re.compile(r"^[A-Za-z0-9_]+$")
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_END = re.compile(r"([A-Z])([A-Z][a-z])")
_LETTER_DIGIT = re.compile(r"([A-Za-z])(\d)")


def _split_affixes(key: str) -> tuple[str, str, str]:
    """Separa underscores de prefixo/sufixo do miolo da chave."""
    core = key.strip("_")
    if not core:
        return key, "", ""
    start = key.index(core)
    return key[:start], core, key[start + len(core) :]


def _is_convertible(key: object) -> bool:
    return isinstance(key, str) and bool(_CONVERTIBLE_KEY.match(key))


def _words(core: str) -> list[str]:
    """Quebra o miolo de uma chave em palavras minúsculas."""
    marked = _LOWER_UPPER.sub(r"\1_\2", core)
    marked = _ACRONYM_END.sub(r"\1_\2", marked)
    marked = _LETTER_DIGIT.sub(r"\1_\2", marked)
    return [word.lower() for word in marked.split("_") if word]


def _join_words(words: list[str], *, capitalize_first: bool) -> str:
    parts: list[str] = []
    for index, word in enumerate(words):
        if word[0].isdigit() and parts:
            parts.append(word)
        elif index == 0 and not capitalize_first:
            parts.append(word)
        else:
            parts.append(word[0].upper() + word[1:])
    return "".join(parts)


def snakecase(key: str) -> str:
    """Converte uma chave para snake_case (formato de wire).

    Exemplo:
        snakecase("quickReplies") == "quick_replies"
        snakecase("has2fa") == "has_2fa"
    """
    if not _is_convertible(key):
        return key
    prefix, core, suffix = _split_affixes(key)
    if not core:
        return key
    return prefix + "_".join(_words(core)) + suffix


def camelcase(key: str) -> str:
    """Converte uma chave snake_case para camelCase (formato idiomático).

    Chaves sem underscore no miolo já são tratadas como camelCase e
    passam inalteradas.

    Exemplo:
        camelcase("message_id") == "messageId"
        camelcase("image_1024") == "image1024"
    """
    if not _is_convertible(key):
        return key
    prefix, core, suffix = _split_affixes(key)
    if "_" not in core:
        return key
    words = [word.lower() for word in core.split("_") if word]
    return prefix + _join_words(words, capitalize_first=False) + suffix


def pascalcase(key: str) -> str:
    """Converte uma chave (camel ou snake) para PascalCase.

    Usado pelos campos de keyboard/rich media do Viber.
    """
    if not _is_convertible(key):
        return key
    prefix, core, suffix = _split_affixes(key)
    if not core:
        return key
    return prefix + _join_words(_words(core), capitalize_first=True) + suffix
