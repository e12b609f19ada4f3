"""Validadores da API de mensagens Twilio (SMS/WhatsApp)."""

from api.validators.twilio.messages import MAX_BODY_LENGTH, validate_message_create

__all__ = [
    "MAX_BODY_LENGTH",
    "validate_message_create",
]
