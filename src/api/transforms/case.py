"""Conversão de casing de chaves (camelCase ⇄ snake_case ⇄ PascalCase).

Opera sobre valores JSON (None, bool, int, float, str, list, dict[str, ...]).
Apenas chaves de mapeamentos são reescritas: ordem de listas, escalares e
valores string passam intactos.

Regra de siglas: uma sequência de maiúsculas seguida de minúscula abre um
novo termo na última maiúscula ("URLId" -> "url_id", "HTTPServer" ->
"http_server"). Dígitos formam termo próprio ("has2fa" -> "has_2fa").

Chaves que não parecem identificadores (numéricas, com "-" ou ".",
iniciadas por "_", vazias) nunca são alteradas.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any

from utils.errors import TransformError

_IDENTIFIER = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")
_DIGIT_RUN = re.compile(r"(\d+)")
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z])([A-Z][a-z])")
_DELIMITERS = re.compile(r"[^A-Za-z0-9]+")

KeyConverter = Callable[[str], str]


def _is_identifier(key: str) -> bool:
    return bool(_IDENTIFIER.match(key))


def _split_words(key: str) -> list[str]:
    """Quebra uma chave em termos pela regra de fronteiras."""
    spaced = _DIGIT_RUN.sub(r"_\1", key)
    spaced = _LOWER_UPPER.sub(r"\1_\2", spaced)
    spaced = _ACRONYM_BOUNDARY.sub(r"\1_\2", spaced)
    return [word for word in _DELIMITERS.split(spaced) if word]


def snakecase(key: str) -> str:
    """Converte chave para snake_case.

    Chaves que já contêm "_" são consideradas no formato de destino.

    Exemplo:
        >>> snakecase("myKey")
        'my_key'
        >>> snakecase("image1024")
        'image_1024'
    """
    if not _is_identifier(key) or "_" in key:
        return key
    return "_".join(word.lower() for word in _split_words(key))


def camelcase(key: str) -> str:
    """Converte chave snake_case para camelCase.

    Termos iniciados por dígito são colados ao termo anterior
    ("has_2fa" -> "has2fa"). Chaves sem "_" não têm o que converter.
    """
    if not _is_identifier(key) or "_" not in key:
        return key

    parts: list[str] = []
    for part in key.split("_"):
        if not part:
            continue
        if parts and part[0].isdigit():
            parts[-1] += part
        else:
            parts.append(part)

    head, *tail = parts
    return head.lower() + "".join(_capitalize(part) for part in tail)


def pascalcase(key: str) -> str:
    """Converte chave para PascalCase ("statusCallback" -> "StatusCallback")."""
    if not _is_identifier(key):
        return key
    return "".join(_capitalize(word) for word in _split_words(key))


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _map_keys(value: Any, convert: KeyConverter, deep: bool) -> Any:
    """Recursão estrutural sobre um valor JSON."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return value

    if isinstance(value, Mapping):
        converted: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TransformError(f"chave de mapeamento deve ser str, recebido {type(key).__name__}")
            converted[convert(key)] = _map_keys(item, convert, deep) if deep else item
        return converted

    if isinstance(value, (list, tuple)):
        if not deep:
            return list(value)
        return [_map_keys(item, convert, deep) for item in value]

    raise TransformError(f"valor não-JSON não suportado: {type(value).__name__}")


def snakecase_keys(value: Any, deep: bool = False) -> Any:
    """Aplica snakecase nas chaves do mapeamento (raso por padrão)."""
    return _map_keys(value, snakecase, deep)


def camelcase_keys(value: Any, deep: bool = False) -> Any:
    """Aplica camelcase nas chaves do mapeamento (raso por padrão)."""
    return _map_keys(value, camelcase, deep)


def pascalcase_keys(value: Any, deep: bool = False) -> Any:
    """Aplica pascalcase nas chaves do mapeamento (raso por padrão)."""
    return _map_keys(value, pascalcase, deep)


def to_snake_case(value: Any) -> Any:
    """Converte todas as chaves de um valor JSON para snake_case."""
    return _map_keys(value, snakecase, deep=True)


def to_camel_case(value: Any) -> Any:
    """Converte todas as chaves de um valor JSON para camelCase."""
    return _map_keys(value, camelcase, deep=True)


def to_pascal_case(value: Any) -> Any:
    """Converte todas as chaves de um valor JSON para PascalCase."""
    return _map_keys(value, pascalcase, deep=True)
