"""Interceptor de requisições outbound.

Lista ordenada de passos puros aplicados pela própria fachada antes de
entregar o envelope ao transporte. Ordem fixa:

1. Conversão de casing do body (e form-encoding, quando aplicável)
2. Callback de observabilidade (recebe cópia; exceções propagam)
3. Assinatura appsecret_proof (requisição simples e sub-requests de batch)

Uso:
    interceptor = create_request_interceptor(
        body_case="snake",
        on_request=my_callback,
        app_secret="...",
        access_token="...",
    )
    envelope = interceptor(envelope)
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Sequence
from typing import Any, Literal
from urllib.parse import urlencode, urlsplit, urlunsplit

from api.transforms.case import to_camel_case, to_pascal_case, to_snake_case
from api.transforms.envelope import FORM_CONTENT_TYPE, NormalizedRequest, RequestEnvelope
from api.transforms.signature import (
    APP_SECRET_PROOF_FIELD,
    apply_proof,
    extract_query_token,
    sign_batch_item,
)

logger = logging.getLogger(__name__)

BodyCase = Literal["snake", "camel", "pascal"]
RequestStep = Callable[[RequestEnvelope], RequestEnvelope]
OnRequest = Callable[[NormalizedRequest], None]

_CASE_CONVERTERS = {
    "snake": to_snake_case,
    "camel": to_camel_case,
    "pascal": to_pascal_case,
}


def default_on_request(request: NormalizedRequest) -> None:
    """Callback padrão: loga método e URL sem query (sem tokens/PII)."""
    parts = urlsplit(request.url)
    logger.debug(
        "outgoing_request",
        extra={
            "method": request.method,
            "url": urlunsplit((parts.scheme, parts.netloc, parts.path, "", "")),
            "has_body": request.body is not None,
        },
    )


def _form_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [_form_value(item) for item in value]
    return value


def convert_body_case(body_case: BodyCase) -> RequestStep:
    """Passo que converte as chaves de bodies dict para o casing de wire.

    Bodies form-encoded de destino (Content-Type x-www-form-urlencoded) são
    serializados após a conversão, repetindo a chave para listas.
    """
    converter = _CASE_CONVERTERS[body_case]

    def step(envelope: RequestEnvelope) -> RequestEnvelope:
        if envelope.is_multipart or not isinstance(envelope.body, dict):
            return envelope

        body = converter(envelope.body)
        if envelope.content_type == FORM_CONTENT_TYPE:
            body = urlencode(
                {key: _form_value(value) for key, value in body.items() if value is not None},
                doseq=True,
            )
        return dataclasses.replace(envelope, body=body)

    return step


def notify_observer(on_request: OnRequest) -> RequestStep:
    """Passo que entrega uma visão normalizada ao callback.

    O callback não pode alterar nem abortar o envelope; exceções lançadas
    por ele não são capturadas.
    """

    def step(envelope: RequestEnvelope) -> RequestEnvelope:
        on_request(NormalizedRequest.from_envelope(envelope))
        return envelope

    return step


def sign_request(
    app_secret: str,
    access_token: str | None = None,
    field: str = APP_SECRET_PROOF_FIELD,
) -> RequestStep:
    """Passo que acrescenta a prova HMAC à URL.

    O token vem da query `access_token` da própria URL ou, na falta dela,
    do token padrão. Envelopes de batch (`body["batch"]` lista) recebem
    também uma prova por sub-request. Sem token a requisição segue sem
    assinatura.
    """

    def step(envelope: RequestEnvelope) -> RequestEnvelope:
        body = envelope.body
        if isinstance(body, dict) and isinstance(body.get("batch"), list):
            body = {
                **body,
                "batch": [
                    sign_batch_item(item, app_secret, access_token, field)
                    if isinstance(item, dict)
                    else item
                    for item in body["batch"]
                ],
            }

        url = envelope.url
        token = extract_query_token(url) or access_token
        if token:
            url = apply_proof(url, app_secret, token, field)
        else:
            logger.debug("request_signing_skipped", extra={"reason": "no_token"})

        return dataclasses.replace(envelope, url=url, body=body)

    return step


class RequestInterceptor:
    """Aplica passos before-send em ordem."""

    def __init__(self, steps: Sequence[RequestStep] = ()) -> None:
        self._steps = tuple(steps)

    @property
    def steps(self) -> tuple[RequestStep, ...]:
        return self._steps

    def __call__(self, envelope: RequestEnvelope) -> RequestEnvelope:
        for step in self._steps:
            envelope = step(envelope)
        return envelope


def create_request_interceptor(
    *,
    body_case: BodyCase | None = None,
    on_request: OnRequest | None = None,
    app_secret: str | None = None,
    access_token: str | None = None,
    skip_app_secret_proof: bool = False,
    proof_field: str = APP_SECRET_PROOF_FIELD,
) -> RequestInterceptor:
    """Monta o interceptor na ordem fixa (casing, observabilidade, assinatura)."""
    steps: list[RequestStep] = []
    if body_case:
        steps.append(convert_body_case(body_case))
    steps.append(notify_observer(on_request or default_on_request))
    if app_secret and not skip_app_secret_proof:
        steps.append(sign_request(app_secret, access_token, proof_field))
    return RequestInterceptor(steps)
