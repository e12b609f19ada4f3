"""Settings do LINE Pay."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.settings.base import parse_bool


@dataclass(frozen=True)
class LinePaySettings:
    """Configurações do LINE Pay.

    Attributes:
        channel_id: Channel ID (header X-LINE-ChannelId)
        channel_secret: Channel secret (header X-LINE-ChannelSecret)
        sandbox: Usa o ambiente sandbox-api-pay.line.me
        api_base_url: Origem customizada (sobrepõe sandbox)
    """

    channel_id: str = ""
    channel_secret: str = ""
    sandbox: bool = False
    api_base_url: str = ""

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.channel_id:
            errors.append("LINE_PAY_CHANNEL_ID não configurado")
        if not self.channel_secret:
            errors.append("LINE_PAY_CHANNEL_SECRET não configurado")

        return errors


def _load_from_env() -> LinePaySettings:
    return LinePaySettings(
        channel_id=os.getenv("LINE_PAY_CHANNEL_ID", ""),
        channel_secret=os.getenv("LINE_PAY_CHANNEL_SECRET", ""),
        sandbox=parse_bool(os.getenv("LINE_PAY_SANDBOX")),
        api_base_url=os.getenv("LINE_PAY_API_BASE_URL", ""),
    )


@lru_cache(maxsize=1)
def get_line_pay_settings() -> LinePaySettings:
    """Retorna instância cacheada de LinePaySettings."""
    return _load_from_env()
