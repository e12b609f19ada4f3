"""Exceções compartilhadas pelos clientes de API.

Taxonomia:
- ValidationError: violação de limite local, antes de qualquer IO (fatal)
- TransformError: valor não-JSON entregue ao pipeline de transformação
- RemoteApiError: provedor respondeu com payload de erro
- HttpError: falha de transporte (conexão/timeout) após retries
"""

from __future__ import annotations

from typing import Any


class MessagingApiError(Exception):
    """Base para todos os erros dos clientes de API."""


class ValidationError(MessagingApiError, ValueError):
    """Limite declarado pelo provedor violado antes do envio."""


class TransformError(MessagingApiError, TypeError):
    """Valor fora do modelo JSON recebido pelo conversor de chaves."""


class HttpError(MessagingApiError):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


class RemoteApiError(MessagingApiError):
    """Erro retornado pelo provedor, normalizado.

    A mensagem preserva o texto original do provedor, prefixado pelo nome
    do provedor (ex: "Messenger API - 190 OAuthException Invalid token").
    """

    def __init__(
        self,
        provider: str,
        message: str,
        *,
        status_code: int | None = None,
        code: int | str | None = None,
        error_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"{provider} API - {message}")
        self.provider = provider
        self.provider_message = message
        self.status_code = status_code
        self.code = code
        self.error_type = error_type
        self.details = details or {}
