"""Testes para api/connectors/line_pay."""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest

from api.connectors.line_pay import LinePayClient, parse_line_pay_error
from tests.fakes.fake_transport import FakeTransport, json_response
from utils.errors import RemoteApiError, ValidationError


def _success(info=None) -> dict:
    payload = {"returnCode": "0000", "returnMessage": "OK"}
    if info is not None:
        payload["info"] = info
    return payload


def _client(transport: FakeTransport, **kwargs) -> LinePayClient:
    return LinePayClient(
        channel_id="CHANNEL_ID",
        channel_secret="CHANNEL_SECRET",
        http_client=transport,
        **kwargs,
    )


class TestConstruction:
    """Origem e headers de autenticação."""

    def test_production_and_sandbox_origins(self) -> None:
        assert _client(FakeTransport()).base_url == "https://api-pay.line.me/v2/"
        assert _client(FakeTransport(), sandbox=True).base_url == (
            "https://sandbox-api-pay.line.me/v2/"
        )
        assert _client(FakeTransport(), origin="https://mock.line").base_url == (
            "https://mock.line/v2/"
        )

    @pytest.mark.asyncio
    async def test_channel_headers(self) -> None:
        transport = FakeTransport(json_response(_success([])))

        await _client(transport).get_payments(order_id="20140101123456789")

        headers = transport.last.headers
        assert headers["X-LINE-ChannelId"] == "CHANNEL_ID"
        assert headers["X-LINE-ChannelSecret"] == "CHANNEL_SECRET"


class TestQueries:
    """get_payments e get_authorizations."""

    @pytest.mark.asyncio
    async def test_get_payments_returns_info(self) -> None:
        info = [{"transactionId": 1020140728100001997, "productName": "tes production"}]
        transport = FakeTransport(json_response(_success(info)))

        result = await _client(transport).get_payments(transaction_id="1020140728100001997")

        assert result == info
        url = urlsplit(transport.last.url)
        assert url.path == "/v2/payments"
        assert parse_qs(url.query) == {"transactionId": ["1020140728100001997"]}

    @pytest.mark.asyncio
    async def test_get_authorizations(self) -> None:
        transport = FakeTransport(json_response(_success([])))

        await _client(transport).get_authorizations(order_id="ORDER")

        url = urlsplit(transport.last.url)
        assert url.path == "/v2/payments/authorizations"
        assert parse_qs(url.query) == {"orderId": ["ORDER"]}

    @pytest.mark.asyncio
    async def test_lookup_without_ids_has_no_io(self) -> None:
        transport = FakeTransport()

        with pytest.raises(ValidationError, match="get_payments"):
            await _client(transport).get_payments()

        assert transport.sent == []


class TestPayments:
    """reserve, confirm, capture, void e refund."""

    @pytest.mark.asyncio
    async def test_reserve_sends_camel_case_body(self) -> None:
        info = {"transactionId": 123123123123, "paymentUrl": {"web": "https://pay"}}
        transport = FakeTransport(json_response(_success(info)))

        result = await _client(transport).reserve(
            product_name="test product",
            amount=10,
            currency="TWD",
            confirm_url="https://example.com/confirm",
            order_id="20140101123456789",
            product_image_url="https://example.com/img.png",
            capture=False,
        )

        assert result == info
        sent = transport.last
        assert sent.url == "https://api-pay.line.me/v2/payments/request"
        assert sent.body == {
            "productName": "test product",
            "amount": 10,
            "currency": "TWD",
            "confirmUrl": "https://example.com/confirm",
            "orderId": "20140101123456789",
            "productImageUrl": "https://example.com/img.png",
            "capture": False,
        }

    @pytest.mark.asyncio
    async def test_reserve_validates_amount(self) -> None:
        transport = FakeTransport()

        with pytest.raises(ValidationError):
            await _client(transport).reserve(
                product_name="p",
                amount=0,
                currency="TWD",
                confirm_url="https://c",
                order_id="o",
            )

        assert transport.sent == []

    @pytest.mark.asyncio
    async def test_confirm_and_capture_paths(self) -> None:
        transport = FakeTransport(json_response(_success({})), json_response(_success({})))
        client = _client(transport)

        await client.confirm("TX1", amount=1000, currency="TWD")
        assert transport.last.url.endswith("/v2/payments/TX1/confirm")
        assert transport.last.body == {"amount": 1000, "currency": "TWD"}

        await client.capture("TX1", amount=1000, currency="TWD")
        assert transport.last.url.endswith("/v2/payments/authorizations/TX1/capture")

    @pytest.mark.asyncio
    async def test_void_without_info(self) -> None:
        transport = FakeTransport(json_response(_success()))

        assert await _client(transport).void("TX1") is None
        assert transport.last.url.endswith("/v2/payments/authorizations/TX1/void")
        assert transport.last.body is None

    @pytest.mark.asyncio
    async def test_refund(self) -> None:
        info = {"refundTransactionId": 123123123123, "refundTransactionDate": "2014-01-01T06:17:41Z"}
        transport = FakeTransport(json_response(_success(info)))

        result = await _client(transport).refund("TX1", refund_amount=500)

        assert result == info
        assert transport.last.body == {"refundAmount": 500}


class TestErrors:
    """returnCode diferente de 0000."""

    @pytest.mark.asyncio
    async def test_failed_return_code_raises(self) -> None:
        transport = FakeTransport(
            json_response({"returnCode": "1104", "returnMessage": "merchant not found"})
        )

        with pytest.raises(RemoteApiError) as exc_info:
            await _client(transport).void("TX1")

        assert str(exc_info.value) == "LINE PAY API - 1104 merchant not found"
        assert exc_info.value.code == "1104"

    def test_success_and_http_error(self) -> None:
        assert parse_line_pay_error(200, _success()) is None
        assert str(parse_line_pay_error(500, None)) == "LINE PAY API - HTTP 500"
