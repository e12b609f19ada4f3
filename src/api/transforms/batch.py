"""Codificação e decodificação de batch requests da Graph API.

Um batch empacota até 50 sub-requests em uma única chamada. O body de cada
sub-request vai como string form-encoded com chaves em snake_case; objetos e
listas aninhados são serializados em JSON como valor da própria chave.

`response_access_path` é metadado só do cliente: sai do payload de wire e é
guardado por posição para projetar a resposta correspondente.

Referência: https://developers.facebook.com/docs/graph-api/batch-requests
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

from api.transforms.case import to_camel_case, to_snake_case
from utils.errors import ValidationError

logger = logging.getLogger(__name__)

MAX_BATCH_SIZE = 50
MIN_BATCH_SIZE = 1

# encodeURIComponent mantém estes caracteres além de letras, dígitos e "-_.~"
_URI_COMPONENT_SAFE = "!*'()"
_INDEX_SEGMENT = re.compile(r"\[(\d+)\]")


@dataclass(frozen=True, slots=True)
class BatchItem:
    """Sub-request de um batch.

    Attributes:
        method: Método HTTP do sub-request
        relative_url: URL relativa à versão da Graph API
        body: Body do sub-request (chaves em qualquer casing)
        name: Nome para referência por outros itens (JSONPath)
        depends_on: Nome do item do qual este depende
        response_access_path: Caminho pontilhado projetado na resposta
    """

    method: str
    relative_url: str
    body: dict[str, Any] | None = None
    name: str | None = None
    depends_on: str | None = None
    response_access_path: str | None = None

    def to_wire(self) -> dict[str, Any]:
        """Representação de wire, sem `response_access_path`."""
        wire: dict[str, Any] = {
            "method": self.method.upper(),
            "relative_url": self.relative_url,
        }
        if self.name:
            wire["name"] = self.name
        if self.depends_on:
            wire["depends_on"] = self.depends_on
        if self.body:
            wire["body"] = encode_form_body(to_snake_case(self.body))
        return wire


@dataclass(frozen=True, slots=True)
class EncodedBatch:
    """Batch pronto para o envelope + caminhos guardados por posição."""

    batch: list[dict[str, Any]]
    response_access_paths: list[str | None] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class BatchResponseItem:
    """Resposta decodificada de um sub-request.

    Status não-2xx não viram exceção: o chamador inspeciona `code`.
    """

    code: int | None
    body: Any = None
    headers: list[dict[str, Any]] | None = None

    @property
    def is_success(self) -> bool:
        return self.code is not None and 200 <= self.code < 300


def validate_batch_size(items: Sequence[Any]) -> None:
    """Garante 1 <= len(items) <= 50.

    Raises:
        ValidationError: Se a cardinalidade estiver fora do limite
    """
    count = len(items)
    if count < MIN_BATCH_SIZE:
        raise ValidationError("batch must contain at least 1 request")
    if count > MAX_BATCH_SIZE:
        raise ValidationError(
            f"batch exceeds maximum of {MAX_BATCH_SIZE} requests (got {count})"
        )


def _form_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def encode_form_body(body: dict[str, Any]) -> str:
    """Serializa um mapeamento como `k=v&k2=v2` (semântica encodeURIComponent)."""
    return "&".join(
        f"{quote(key, safe=_URI_COMPONENT_SAFE)}={quote(_form_value(value), safe=_URI_COMPONENT_SAFE)}"
        for key, value in body.items()
    )


def _as_batch_item(item: BatchItem | dict[str, Any]) -> BatchItem:
    if isinstance(item, BatchItem):
        return item
    normalized = to_snake_case({k: v for k, v in item.items() if k != "body"})
    return BatchItem(
        method=normalized["method"],
        relative_url=normalized["relative_url"],
        body=item.get("body"),
        name=normalized.get("name"),
        depends_on=normalized.get("depends_on"),
        response_access_path=normalized.get("response_access_path"),
    )


def encode_batch(items: Sequence[BatchItem | dict[str, Any]]) -> EncodedBatch:
    """Codifica sub-requests para o envelope de batch.

    Args:
        items: BatchItem ou dicts equivalentes (camelCase ou snake_case)

    Raises:
        ValidationError: Se 0 ou mais de 50 itens (antes de qualquer IO)
    """
    validate_batch_size(items)
    batch_items = [_as_batch_item(item) for item in items]
    return EncodedBatch(
        batch=[item.to_wire() for item in batch_items],
        response_access_paths=[item.response_access_path for item in batch_items],
    )


def get_path(value: Any, path: str) -> Any:
    """Projeta `value` por um caminho pontilhado ("data.id", "data[0].id").

    Segmento ausente retorna None em vez de levantar exceção.
    """
    current = value
    for segment in _INDEX_SEGMENT.sub(r".\1", path).split("."):
        if not segment:
            continue
        if isinstance(current, dict):
            if segment not in current:
                return None
            current = current[segment]
        elif isinstance(current, list) and segment.isdigit():
            index = int(segment)
            if index >= len(current):
                return None
            current = current[index]
        else:
            return None
    return current


def _parse_body(raw_body: Any) -> Any:
    if not isinstance(raw_body, str):
        return to_camel_case(raw_body)
    try:
        parsed = json.loads(raw_body)
    except json.JSONDecodeError:
        return raw_body
    return to_camel_case(parsed)


def decode_batch_item(raw_item: Any, response_access_path: str | None = None) -> BatchResponseItem:
    """Decodifica um sub-response e projeta o body pelo caminho guardado."""
    if not isinstance(raw_item, dict):
        return BatchResponseItem(code=None, body=None)

    envelope = to_camel_case({k: v for k, v in raw_item.items() if k != "body"})
    body = _parse_body(raw_item.get("body"))
    if response_access_path and body is not None:
        body = get_path(body, response_access_path)

    return BatchResponseItem(
        code=envelope.get("code"),
        body=body,
        headers=envelope.get("headers"),
    )


def decode_batch(
    raw_response: Sequence[Any],
    response_access_paths: Sequence[str | None],
) -> list[BatchResponseItem]:
    """Decodifica a resposta do batch preservando a ordem posicional.

    Args:
        raw_response: Lista de sub-responses do provedor ({code, headers, body})
        response_access_paths: Caminhos guardados no encode, por posição

    Returns:
        Uma entrada por sub-response, na mesma ordem
    """
    if len(raw_response) != len(response_access_paths):
        logger.warning(
            "batch_response_length_mismatch",
            extra={
                "responses": len(raw_response),
                "requests": len(response_access_paths),
            },
        )

    results: list[BatchResponseItem] = []
    for index, raw_item in enumerate(raw_response):
        path = response_access_paths[index] if index < len(response_access_paths) else None
        results.append(decode_batch_item(raw_item, path))
    return results
