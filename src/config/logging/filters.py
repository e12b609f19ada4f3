"""Filters de logging para contexto e redação de segredos.

Campos injetados:
- correlation_id: ID de rastreamento fornecido pela aplicação
- service: Nome do serviço

Query strings com `access_token`/`appsecret_proof` têm o valor mascarado
antes da formatação.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "***"

SECRET_QUERY_PARAMS = ("access_token", "appsecret_proof", "client_secret")

_SECRET_PATTERN = re.compile(
    r"(?P<key>(?:%s))=(?P<value>[^&\s\"']+)" % "|".join(SECRET_QUERY_PARAMS)
)


def redact_secrets(text: str) -> str:
    """Mascara valores de parâmetros sensíveis em URLs/mensagens."""
    return _SECRET_PATTERN.sub(lambda m: f"{m.group('key')}={REDACTED}", text)


class ServiceContextFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Se correlation_id já foi passado via `extra`, preserva o valor.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SecretRedactionFilter(logging.Filter):
    """Remove tokens de `msg`, `url` e `endpoint` antes da formatação."""

    _FIELDS = ("url", "endpoint")

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = redact_secrets(record.msg)
        for field in self._FIELDS:
            value = getattr(record, field, None)
            if isinstance(value, str):
                setattr(record, field, redact_secrets(value))
        return True
