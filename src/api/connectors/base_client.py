"""Fachada base para clientes de API REST.

Compõe o pipeline de cada chamada:
envelope → interceptor (casing, observabilidade, assinatura) → transporte
→ decodificação da resposta → erro normalizado ou body em camelCase.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar
from urllib.parse import urlsplit, urlunsplit

from api.connectors.http_base import HttpClient
from api.connectors.remote_logging import log_remote_error, log_success
from api.transforms.case import to_camel_case
from api.transforms.envelope import RequestEnvelope
from api.transforms.signature import append_query
from utils.errors import RemoteApiError

if TYPE_CHECKING:
    import httpx

    from api.transforms.interceptor import RequestInterceptor
    from app.protocols.http_client import HttpTransportProtocol


def _strip_query(url: str) -> str:
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def decode_response_body(response: httpx.Response) -> Any:
    """Decodifica JSON quando possível; caso contrário devolve o texto."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class BaseApiClient:
    """Base das fachadas por provedor.

    Subclasses definem `provider` e, quando o provedor tem payload de erro
    próprio, sobrescrevem `parse_error`.
    """

    provider: ClassVar[str] = ""

    def __init__(
        self,
        *,
        base_url: str,
        interceptor: RequestInterceptor,
        http_client: HttpTransportProtocol | None = None,
        default_headers: Mapping[str, str] | None = None,
    ) -> None:
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._interceptor = interceptor
        self._http_client = http_client or HttpClient()
        self._default_headers = dict(default_headers or {})

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def interceptor(self) -> RequestInterceptor:
        return self._interceptor

    def build_request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        files: dict[str, Any] | None = None,
    ) -> RequestEnvelope:
        """Monta o envelope e aplica o interceptor."""
        url = self._base_url + path.lstrip("/")
        query = {k: v for k, v in (params or {}).items() if v is not None}
        if query:
            url = append_query(url, query)

        merged_headers = {**self._default_headers, **(headers or {})}
        if files is not None:
            # httpx define o boundary do multipart
            merged_headers = {
                k: v for k, v in merged_headers.items() if k.lower() != "content-type"
            }

        envelope = RequestEnvelope(
            method=method.upper(),
            url=url,
            headers=merged_headers,
            body=body,
            files=files,
        )
        return self._interceptor(envelope)

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        files: dict[str, Any] | None = None,
        camelcase_response: bool = True,
    ) -> Any:
        """Executa uma chamada e devolve o body decodificado.

        Raises:
            RemoteApiError: Se o provedor responder com payload de erro
            HttpError: Se o transporte falhar
        """
        envelope = self.build_request(
            method, path, body=body, params=params, headers=headers, files=files
        )
        response = await self._http_client.send(envelope)
        return self._process_response(response, envelope, camelcase_response)

    def _process_response(
        self,
        response: httpx.Response,
        envelope: RequestEnvelope,
        camelcase_response: bool,
    ) -> Any:
        data = decode_response_body(response)
        endpoint = _strip_query(envelope.url)

        error = self.parse_error(response.status_code, data)
        if error is not None:
            log_remote_error(error, envelope.method, endpoint)
            raise error

        log_success(self.provider, envelope.method, endpoint, response.status_code)
        if camelcase_response and isinstance(data, (dict, list)):
            return to_camel_case(data)
        return data

    def parse_error(self, status_code: int, data: Any) -> RemoteApiError | None:
        """Normaliza respostas de erro genéricas (status >= 400)."""
        if status_code < 400:
            return None
        message = data if isinstance(data, str) and data else f"HTTP {status_code}"
        return RemoteApiError(self.provider, message, status_code=status_code)
