"""Helpers de logging para respostas dos provedores (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from utils.errors import RemoteApiError

logger = logging.getLogger(__name__)


def log_remote_error(
    error: RemoteApiError,
    method: str,
    endpoint: str,
) -> None:
    """Loga erro do provedor sem expor tokens ou payloads."""
    logger.warning(
        "remote_api_error",
        extra={
            "provider": error.provider,
            "method": method,
            "endpoint": endpoint,
            "status_code": error.status_code,
            "error_code": error.code,
            "error_type": error.error_type,
        },
    )


def log_success(
    provider: str,
    method: str,
    endpoint: str,
    status_code: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "remote_api_success",
        extra={
            "provider": provider,
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
