"""Settings da Twilio (SMS/WhatsApp)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

TWILIO_API_BASE_URL: str = "https://api.twilio.com"


@dataclass(frozen=True)
class TwilioSettings:
    """Configurações da Twilio.

    Attributes:
        account_sid: Account SID (usuário da autenticação basic)
        auth_token: Auth token (senha da autenticação basic)
        phone_number: Número de origem (ex: whatsapp:+14155238886)
        api_base_url: Origem da API
        request_timeout_seconds: Timeout para requisições HTTP
    """

    account_sid: str = ""
    auth_token: str = ""
    phone_number: str = ""
    api_base_url: str = TWILIO_API_BASE_URL
    request_timeout_seconds: float = 30.0

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.account_sid:
            errors.append("TWILIO_ACCOUNT_SID não configurado")
        if not self.auth_token:
            errors.append("TWILIO_AUTH_TOKEN não configurado")
        if not self.phone_number:
            errors.append("TWILIO_PHONE_NUMBER não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("TWILIO_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> TwilioSettings:
    return TwilioSettings(
        account_sid=os.getenv("TWILIO_ACCOUNT_SID", ""),
        auth_token=os.getenv("TWILIO_AUTH_TOKEN", ""),
        phone_number=os.getenv("TWILIO_PHONE_NUMBER", ""),
        api_base_url=os.getenv("TWILIO_API_BASE_URL", TWILIO_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("TWILIO_REQUEST_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_twilio_settings() -> TwilioSettings:
    """Retorna instância cacheada de TwilioSettings."""
    return _load_from_env()
