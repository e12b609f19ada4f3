"""Fachada da API LINE Pay (v2).

O provedor responde HTTP 200 mesmo em falhas; o sucesso é indicado por
`returnCode == "0000"`. Métodos devolvem apenas o campo `info`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.base_client import BaseApiClient
from api.transforms.envelope import JSON_CONTENT_TYPE
from api.transforms.interceptor import create_request_interceptor
from api.validators.line_pay import (
    validate_amount,
    validate_payment_lookup,
    validate_reserve_request,
)
from utils.errors import RemoteApiError

if TYPE_CHECKING:
    from api.transforms.interceptor import OnRequest
    from app.protocols.http_client import HttpTransportProtocol
    from app.protocols.models import LinePayCurrency

PROVIDER = "LINE PAY"
DEFAULT_ORIGIN = "https://api-pay.line.me"
SANDBOX_ORIGIN = "https://sandbox-api-pay.line.me"
SUCCESS_RETURN_CODE = "0000"


def parse_line_pay_error(status_code: int, data: Any) -> RemoteApiError | None:
    """Converte `{returnCode, returnMessage}` != "0000" em RemoteApiError."""
    if isinstance(data, dict) and "returnCode" in data:
        return_code = data["returnCode"]
        if return_code == SUCCESS_RETURN_CODE:
            return None
        return RemoteApiError(
            PROVIDER,
            f"{return_code} {data.get('returnMessage', '')}".rstrip(),
            status_code=status_code,
            code=return_code,
        )
    if status_code >= 400:
        return RemoteApiError(PROVIDER, f"HTTP {status_code}", status_code=status_code)
    return None


class LinePayClient(BaseApiClient):
    """Cliente LINE Pay autenticado por channel id/secret em headers.

    Bodies aceitam chaves em snake_case e são enviados em camelCase.
    """

    provider = PROVIDER

    def __init__(
        self,
        *,
        channel_id: str,
        channel_secret: str,
        sandbox: bool = False,
        origin: str | None = None,
        on_request: OnRequest | None = None,
        http_client: HttpTransportProtocol | None = None,
    ) -> None:
        self.sandbox = sandbox
        super().__init__(
            base_url=f"{origin or (SANDBOX_ORIGIN if sandbox else DEFAULT_ORIGIN)}/v2/",
            interceptor=create_request_interceptor(body_case="camel", on_request=on_request),
            http_client=http_client,
            default_headers={
                "Content-Type": JSON_CONTENT_TYPE,
                "X-LINE-ChannelId": channel_id,
                "X-LINE-ChannelSecret": channel_secret,
            },
        )

    def parse_error(self, status_code: int, data: Any) -> RemoteApiError | None:
        return parse_line_pay_error(status_code, data)

    async def _call(self, method: str, path: str, **kwargs: Any) -> Any:
        data = await self.request(method, path, **kwargs)
        return data.get("info") if isinstance(data, dict) else None

    async def get_payments(
        self,
        *,
        transaction_id: str | None = None,
        order_id: str | None = None,
    ) -> Any:
        """Consulta pagamentos por transaction_id ou order_id."""
        validate_payment_lookup("get_payments", transaction_id, order_id)
        return await self._call(
            "GET", "payments", params={"transactionId": transaction_id, "orderId": order_id}
        )

    async def get_authorizations(
        self,
        *,
        transaction_id: str | None = None,
        order_id: str | None = None,
    ) -> Any:
        validate_payment_lookup("get_authorizations", transaction_id, order_id)
        return await self._call(
            "GET",
            "payments/authorizations",
            params={"transactionId": transaction_id, "orderId": order_id},
        )

    async def reserve(
        self,
        *,
        product_name: str,
        amount: int | float,
        currency: LinePayCurrency,
        confirm_url: str,
        order_id: str,
        **options: Any,
    ) -> Any:
        """Reserva um pagamento e devolve `{transactionId, paymentUrl, ...}`.

        Raises:
            ValidationError: Campos obrigatórios ausentes ou valor inválido
            RemoteApiError: returnCode diferente de "0000"
        """
        validate_reserve_request(
            product_name=product_name,
            amount=amount,
            currency=currency,
            confirm_url=confirm_url,
            order_id=order_id,
        )
        body = {
            "product_name": product_name,
            "amount": amount,
            "currency": currency,
            "confirm_url": confirm_url,
            "order_id": order_id,
            **options,
        }
        return await self._call("POST", "payments/request", body=body)

    async def confirm(
        self,
        transaction_id: str,
        *,
        amount: int | float,
        currency: LinePayCurrency,
    ) -> Any:
        validate_amount(amount, currency)
        return await self._call(
            "POST",
            f"payments/{transaction_id}/confirm",
            body={"amount": amount, "currency": currency},
        )

    async def capture(
        self,
        transaction_id: str,
        *,
        amount: int | float,
        currency: LinePayCurrency,
    ) -> Any:
        validate_amount(amount, currency)
        return await self._call(
            "POST",
            f"payments/authorizations/{transaction_id}/capture",
            body={"amount": amount, "currency": currency},
        )

    async def void(self, transaction_id: str) -> Any:
        return await self._call("POST", f"payments/authorizations/{transaction_id}/void")

    async def refund(self, transaction_id: str, *, refund_amount: int | float | None = None) -> Any:
        """Estorna total ou parcialmente (`refund_amount`)."""
        body = {} if refund_amount is None else {"refund_amount": refund_amount}
        return await self._call("POST", f"payments/{transaction_id}/refund", body=body)
