"""Envelope de requisição outbound.

Criado por chamada na fachada, transformado pelos passos do interceptor
(sempre via `dataclasses.replace`) e entregue congelado ao transporte.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True, slots=True)
class RequestEnvelope:
    """Requisição pronta para o transporte HTTP.

    Attributes:
        method: Método HTTP em maiúsculas
        url: URL absoluta (inclui query)
        headers: Headers da requisição
        body: Valor JSON, string form-encoded ou campos de formulário multipart
        files: Partes binárias de upload multipart (delegado ao httpx)
    """

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
    files: dict[str, Any] | None = None

    @property
    def content_type(self) -> str:
        for key, value in self.headers.items():
            if key.lower() == "content-type":
                return value.split(";")[0].strip().lower()
        return ""

    @property
    def is_multipart(self) -> bool:
        return self.files is not None


@dataclass(frozen=True, slots=True)
class NormalizedRequest:
    """Visão de uma requisição entregue ao callback de observabilidade.

    Contém cópias: alterações feitas pelo callback não chegam ao envelope.
    """

    method: str
    url: str
    body: Any
    headers: dict[str, str]

    @classmethod
    def from_envelope(cls, envelope: RequestEnvelope) -> NormalizedRequest:
        return cls(
            method=envelope.method.lower(),
            url=envelope.url,
            body=copy.deepcopy(envelope.body),
            headers=dict(envelope.headers),
        )
