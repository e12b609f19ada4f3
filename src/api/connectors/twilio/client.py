"""Fachada da API REST da Twilio (SMS e WhatsApp).

Bodies vão form-encoded com chaves em PascalCase (listas repetem a chave,
ex: MediaUrl=a&MediaUrl=b). Respostas voltam em camelCase.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.base_client import BaseApiClient
from api.connectors.http_base import HttpClient, HttpClientConfig
from api.transforms.envelope import FORM_CONTENT_TYPE
from api.transforms.interceptor import create_request_interceptor
from api.validators.twilio import validate_message_create
from utils.errors import RemoteApiError

if TYPE_CHECKING:
    from api.transforms.interceptor import OnRequest
    from app.protocols.http_client import HttpTransportProtocol

PROVIDER = "Twilio"
DEFAULT_ORIGIN = "https://api.twilio.com"
API_VERSION = "2010-04-01"


def parse_twilio_error(status_code: int, data: Any) -> RemoteApiError | None:
    """Extrai `{code, message, more_info, status}` do response de erro.

    Referência:
    https://www.twilio.com/docs/usage/troubleshooting/debugging-your-application
    """
    if status_code < 400:
        return None
    if not isinstance(data, dict) or "message" not in data:
        return RemoteApiError(PROVIDER, f"HTTP {status_code}", status_code=status_code)

    code = data.get("code")
    more_info = data.get("more_info") or data.get("moreInfo")
    return RemoteApiError(
        PROVIDER,
        f"{code} {data['message']} {more_info}",
        status_code=status_code,
        code=code,
        details={"more_info": more_info} if more_info else None,
    )


class MessageListInstance:
    """Métodos `messages.*`."""

    def __init__(self, client: TwilioClient) -> None:
        self._client = client

    async def create(self, **options: Any) -> dict[str, Any]:
        """Envia uma mensagem.

        `from` é preenchido com o número do cliente; use `from_` para
        sobrescrever.

        Exemplo:
            await twilio.messages.create(
                to="whatsapp:+15005550006",
                body="Olá",
                media_url=["https://example.com/img1.gif"],
            )

        Raises:
            ValidationError: Sem destinatário ou conteúdo (antes do envio)
            RemoteApiError: Erro da API Twilio
        """
        if "from_" in options:
            options["from"] = options.pop("from_")
        payload = {"from": self._client.phone_number, **options}
        validate_message_create(payload)
        return await self._client.request("POST", "Messages.json", body=payload)


class TwilioClient(BaseApiClient):
    """Cliente Twilio com autenticação basic (account SID + auth token)."""

    provider = PROVIDER

    def __init__(
        self,
        *,
        account_sid: str,
        auth_token: str,
        phone_number: str,
        origin: str | None = None,
        on_request: OnRequest | None = None,
        http_client: HttpTransportProtocol | None = None,
        timeout_seconds: float = 30.0,
    ) -> None:
        self.account_sid = account_sid
        self.phone_number = phone_number
        super().__init__(
            base_url=f"{origin or DEFAULT_ORIGIN}/{API_VERSION}/Accounts/{account_sid}/",
            interceptor=create_request_interceptor(body_case="pascal", on_request=on_request),
            http_client=http_client
            or HttpClient(
                HttpClientConfig(timeout_seconds=timeout_seconds, auth=(account_sid, auth_token))
            ),
            default_headers={"Content-Type": FORM_CONTENT_TYPE},
        )
        self.messages = MessageListInstance(self)

    def parse_error(self, status_code: int, data: Any) -> RemoteApiError | None:
        return parse_twilio_error(status_code, data)
