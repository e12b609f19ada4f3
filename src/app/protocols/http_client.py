"""Protocolos HTTP usados pelas fachadas.

O transporte é plugável: qualquer objeto com `send(envelope)` assíncrono
que devolva um `httpx.Response` serve (ex: HttpClient, fakes de teste).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import httpx

    from api.transforms.envelope import NormalizedRequest, RequestEnvelope


class HttpTransportProtocol(Protocol):
    """Contrato mínimo para o transporte HTTP."""

    async def send(self, envelope: RequestEnvelope) -> httpx.Response: ...


class OnRequestProtocol(Protocol):
    """Callback de observabilidade invocado uma vez por requisição."""

    def __call__(self, request: NormalizedRequest) -> None: ...
