"""Validadores para criação de Message resources."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from utils.errors import ValidationError

# https://www.twilio.com/docs/sms/api/message-resource#create-a-message-resource
MAX_BODY_LENGTH = 1600


def validate_message_create(options: Mapping[str, Any]) -> None:
    """Valida opções de `messages.create`.

    Args:
        options: Opções em camelCase ou snake_case

    Raises:
        ValidationError: Se destinatário ausente, sem conteúdo ou body longo
    """
    if not options.get("to"):
        raise ValidationError("to is required")

    body = options.get("body")
    media_url = options.get("mediaUrl") or options.get("media_url")
    content_sid = options.get("contentSid") or options.get("content_sid")
    if not body and not media_url and not content_sid:
        raise ValidationError("one of body, mediaUrl or contentSid is required")

    if body and len(body) > MAX_BODY_LENGTH:
        raise ValidationError(f"body exceeds {MAX_BODY_LENGTH} character limit")
