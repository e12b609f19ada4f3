"""Factories dos clientes de API a partir das settings.

Cada factory aceita settings explícitas (testes) ou carrega do ambiente, e
falha com ValueError quando faltam credenciais obrigatórias.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.http_base import HttpClient, HttpClientConfig
from api.connectors.line_pay import LinePayClient
from api.connectors.messenger import MessengerClient
from api.connectors.twilio import TwilioClient
from config.settings import (
    get_line_pay_settings,
    get_messenger_settings,
    get_twilio_settings,
)

if TYPE_CHECKING:
    from api.transforms.interceptor import OnRequest
    from app.protocols.http_client import HttpTransportProtocol
    from config.settings import LinePaySettings, MessengerSettings, TwilioSettings

logger = logging.getLogger(__name__)


def _ensure_valid(provider: str, errors: list[str]) -> None:
    if not errors:
        return
    logger.warning(
        "client_settings_invalid",
        extra={"component": "bootstrap", "provider": provider, "error_count": len(errors)},
    )
    details = "\n".join(f"- {error}" for error in errors)
    raise ValueError(f"Configuração inválida para {provider}:\n{details}")


def create_messenger_client(
    settings: MessengerSettings | None = None,
    *,
    on_request: OnRequest | None = None,
    http_client: HttpTransportProtocol | None = None,
) -> MessengerClient:
    """Cria MessengerClient a partir de MessengerSettings.

    Raises:
        ValueError: Se as settings forem inválidas
    """
    settings = settings or get_messenger_settings()
    _ensure_valid("messenger", settings.validate())

    client = MessengerClient(
        access_token=settings.access_token,
        app_secret=settings.app_secret or None,
        app_id=settings.app_id or None,
        version=settings.api_version,
        origin=settings.api_base_url,
        skip_app_secret_proof=settings.should_skip_app_secret_proof,
        on_request=on_request,
        http_client=http_client
        or HttpClient(
            HttpClientConfig(
                timeout_seconds=settings.request_timeout_seconds,
                max_retries=settings.max_retries,
            )
        ),
    )
    logger.info(
        "messenger_client_created",
        extra={
            "component": "bootstrap",
            "api_version": client.version,
            "signed": not settings.should_skip_app_secret_proof,
        },
    )
    return client


def create_twilio_client(
    settings: TwilioSettings | None = None,
    *,
    on_request: OnRequest | None = None,
    http_client: HttpTransportProtocol | None = None,
) -> TwilioClient:
    settings = settings or get_twilio_settings()
    _ensure_valid("twilio", settings.validate())

    client = TwilioClient(
        account_sid=settings.account_sid,
        auth_token=settings.auth_token,
        phone_number=settings.phone_number,
        origin=settings.api_base_url,
        on_request=on_request,
        http_client=http_client,
        timeout_seconds=settings.request_timeout_seconds,
    )
    logger.info("twilio_client_created", extra={"component": "bootstrap"})
    return client


def create_line_pay_client(
    settings: LinePaySettings | None = None,
    *,
    on_request: OnRequest | None = None,
    http_client: HttpTransportProtocol | None = None,
) -> LinePayClient:
    settings = settings or get_line_pay_settings()
    _ensure_valid("line_pay", settings.validate())

    client = LinePayClient(
        channel_id=settings.channel_id,
        channel_secret=settings.channel_secret,
        sandbox=settings.sandbox,
        origin=settings.api_base_url or None,
        on_request=on_request,
        http_client=http_client,
    )
    logger.info(
        "line_pay_client_created",
        extra={"component": "bootstrap", "sandbox": settings.sandbox},
    )
    return client
