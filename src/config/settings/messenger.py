"""Settings do Messenger (Graph API)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.settings.base import parse_bool

GRAPH_API_VERSION: str = "v12.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"


@dataclass(frozen=True)
class MessengerSettings:
    """Configurações do Messenger.

    Attributes:
        access_token: Page access token
        app_secret: App secret usado no appsecret_proof
        app_id: ID do app
        api_version: Versão da Graph API (ex: v12.0)
        api_base_url: Origem da Graph API
        skip_app_secret_proof: Desliga a assinatura. None = sem app secret
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de tentativas em caso de erro transitório
    """

    access_token: str = ""
    app_secret: str = ""
    app_id: str = ""

    api_version: str = GRAPH_API_VERSION
    api_base_url: str = GRAPH_API_BASE_URL
    skip_app_secret_proof: bool | None = None

    request_timeout_seconds: float = 30.0
    max_retries: int = 3

    @property
    def should_skip_app_secret_proof(self) -> bool:
        if self.skip_app_secret_proof is None:
            return not self.app_secret
        return self.skip_app_secret_proof

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Messenger.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.access_token:
            errors.append("MESSENGER_ACCESS_TOKEN não configurado")

        if not self.should_skip_app_secret_proof and not self.app_secret:
            errors.append(
                "MESSENGER_APP_SECRET obrigatório quando MESSENGER_SKIP_APP_SECRET_PROOF=false"
            )

        if self.request_timeout_seconds <= 0:
            errors.append("MESSENGER_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("MESSENGER_MAX_RETRIES deve ser >= 0")

        return errors


def _load_from_env() -> MessengerSettings:
    skip_raw = os.getenv("MESSENGER_SKIP_APP_SECRET_PROOF")
    return MessengerSettings(
        access_token=os.getenv("MESSENGER_ACCESS_TOKEN", ""),
        app_secret=os.getenv("MESSENGER_APP_SECRET", ""),
        app_id=os.getenv("MESSENGER_APP_ID", ""),
        api_version=os.getenv("MESSENGER_API_VERSION", GRAPH_API_VERSION),
        api_base_url=os.getenv("MESSENGER_API_BASE_URL", GRAPH_API_BASE_URL),
        skip_app_secret_proof=parse_bool(skip_raw) if skip_raw else None,
        request_timeout_seconds=float(os.getenv("MESSENGER_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("MESSENGER_MAX_RETRIES", "3")),
    )


@lru_cache(maxsize=1)
def get_messenger_settings() -> MessengerSettings:
    """Retorna instância cacheada de MessengerSettings."""
    return _load_from_env()
