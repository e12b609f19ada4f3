"""Prova HMAC-SHA256 (appsecret_proof) para requisições à Graph API.

A prova é calculada a cada requisição sobre o access token, usando o app
secret como chave. Nunca é cacheada nem logada.

Referência: https://developers.facebook.com/docs/graph-api/security/
"""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

APP_SECRET_PROOF_FIELD = "appsecret_proof"
ACCESS_TOKEN_FIELD = "access_token"


def sign(secret: str, token: str) -> str:
    """Calcula HMAC-SHA256 de `token` com chave `secret`.

    Returns:
        Digest hexadecimal minúsculo (64 caracteres)
    """
    return hmac.new(secret.encode("utf-8"), token.encode("utf-8"), hashlib.sha256).hexdigest()


def append_query(url: str, params: Mapping[str, str]) -> str:
    """Acrescenta parâmetros ao final da query sem reordenar os existentes."""
    parts = urlsplit(url)
    extra = urlencode(params)
    query = f"{parts.query}&{extra}" if parts.query else extra
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def apply_proof(
    url: str,
    secret: str,
    token: str,
    field: str = APP_SECRET_PROOF_FIELD,
) -> str:
    """Retorna `url` com `field=<sign(secret, token)>` no fim da query."""
    return append_query(url, {field: sign(secret, token)})


def extract_query_token(url: str, field: str = ACCESS_TOKEN_FIELD) -> str | None:
    """Lê o token da query de uma URL (absoluta ou relativa)."""
    for key, value in parse_qsl(urlsplit(url).query, keep_blank_values=False):
        if key == field:
            return value
    return None


def extract_body_token(body: Any, field: str = ACCESS_TOKEN_FIELD) -> str | None:
    """Lê o token de um body form-encoded ou de um mapeamento.

    Mapeamentos aceitam a chave em snake_case ou camelCase.
    """
    if isinstance(body, str):
        for key, value in parse_qsl(body):
            if key == field and value:
                return value
        return None

    if isinstance(body, Mapping):
        value = body.get(field) or body.get("accessToken")
        return value if isinstance(value, str) and value else None

    return None


def resolve_item_token(
    item: Mapping[str, Any],
    default_token: str | None = None,
) -> str | None:
    """Localiza o token de um sub-request de batch.

    Ordem: query da relative_url, body do item, token padrão da fachada.
    """
    relative_url = item.get("relative_url") or item.get("relativeUrl") or ""
    return (
        extract_query_token(relative_url)
        or extract_body_token(item.get("body"))
        or default_token
        or None
    )


def sign_batch_item(
    item: Mapping[str, Any],
    secret: str,
    default_token: str | None = None,
    field: str = APP_SECRET_PROOF_FIELD,
) -> dict[str, Any]:
    """Assina a relative_url de um sub-request de forma independente.

    Sem token resolvível o item é devolvido sem alteração (modo sem assinatura).
    """
    signed = dict(item)
    token = resolve_item_token(item, default_token)
    if not token:
        return signed

    url_key = "relativeUrl" if "relativeUrl" in item and "relative_url" not in item else "relative_url"
    signed[url_key] = apply_proof(item.get(url_key) or "", secret, token, field)
    return signed
