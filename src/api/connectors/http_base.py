"""Cliente HTTP base (transporte) para os conectores da camada API.

Recebe envelopes já transformados pelo interceptor e escolhe a
serialização pelo formato do body:
- dict/list: JSON
- str: conteúdo bruto (form-encoded)
- files presente: multipart (campos do body + partes binárias)
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from utils.errors import HttpError

if TYPE_CHECKING:
    from api.transforms.envelope import RequestEnvelope

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429})


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    max_retries: int = 3
    backoff_base_seconds: float = 2.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    auth: tuple[str, str] | None = None


def _is_retryable_status(status_code: int) -> bool:
    return status_code in RETRYABLE_STATUS_CODES or status_code >= 500


def _body_kwargs(envelope: RequestEnvelope) -> dict[str, Any]:
    if envelope.files is not None:
        return {"data": envelope.body or {}, "files": envelope.files}
    if envelope.body is None:
        return {}
    if isinstance(envelope.body, (str, bytes)):
        return {"content": envelope.body}
    return {"json": envelope.body}


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Status 429/5xx e falhas de conexão são retentados com backoff. Na última
    tentativa a resposta com status retentável é devolvida para que a
    fachada decodifique o erro do provedor.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client

    async def send(self, envelope: RequestEnvelope) -> httpx.Response:
        """Executa o envelope com retries previsíveis.

        Raises:
            HttpError: Falha de conexão/timeout após esgotar tentativas
        """
        headers = {**self._config.default_headers, **envelope.headers}
        for attempt in range(self._config.max_retries + 1):
            try:
                response = await self._execute(envelope, headers)
                is_last = attempt >= self._config.max_retries
                if _is_retryable_status(response.status_code) and not is_last:
                    logger.info(
                        "http_retryable_status",
                        extra={"status_code": response.status_code, "attempt": attempt + 1},
                    )
                    await _backoff_sleep(
                        attempt,
                        self._config.backoff_base_seconds,
                        self._config.backoff_max_seconds,
                    )
                    continue
                return response
            except (httpx.TimeoutException, httpx.ConnectError) as exc:
                if attempt >= self._config.max_retries:
                    raise HttpError("http_connection_error", is_retryable=True) from exc
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
        raise HttpError("http_retry_exhausted", is_retryable=True)

    async def _execute(
        self,
        envelope: RequestEnvelope,
        headers: dict[str, str],
    ) -> httpx.Response:
        kwargs: dict[str, Any] = {
            "headers": headers,
            "timeout": self._config.timeout_seconds,
            **_body_kwargs(envelope),
        }
        if self._config.auth:
            kwargs["auth"] = self._config.auth

        if self._client is not None:
            return await self._client.request(envelope.method, envelope.url, **kwargs)

        async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
            return await client.request(envelope.method, envelope.url, **kwargs)


async def _backoff_sleep(attempt: int, base: float, max_seconds: float) -> None:
    backoff = min((2**attempt) * base, max_seconds)
    logger.info("http_backoff", extra={"backoff_seconds": backoff})
    await asyncio.sleep(backoff)
