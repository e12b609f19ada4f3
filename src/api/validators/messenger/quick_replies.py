"""Validadores para quick replies e mensagens do Messenger."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from api.validators.messenger.limits import (
    MAX_QUICK_REPLIES,
    MAX_QUICK_REPLY_PAYLOAD_LENGTH,
    MAX_QUICK_REPLY_TITLE_LENGTH,
    MAX_TEXT_LENGTH,
)
from app.protocols.models import QuickReply
from utils.errors import ValidationError


def _parse_quick_reply(index: int, raw: QuickReply | Mapping[str, Any]) -> QuickReply:
    if isinstance(raw, QuickReply):
        return raw
    if not isinstance(raw, Mapping):
        raise ValidationError(f"quick_replies[{index}] must be an object")
    try:
        return QuickReply.model_validate(dict(raw))
    except PydanticValidationError as exc:
        raise ValidationError(f"quick_replies[{index}] is invalid: {exc.errors()[0]['msg']}") from exc


def _validate_text_quick_reply(index: int, quick_reply: QuickReply) -> None:
    title = quick_reply.title or ""
    if not title.strip():
        raise ValidationError(f"quick_replies[{index}].title is required for text quick replies")
    if len(title) > MAX_QUICK_REPLY_TITLE_LENGTH:
        raise ValidationError(
            f"quick_replies[{index}].title exceeds {MAX_QUICK_REPLY_TITLE_LENGTH} character limit"
        )

    payload = quick_reply.payload or ""
    if not payload:
        raise ValidationError(f"quick_replies[{index}].payload is required for text quick replies")
    if len(payload) > MAX_QUICK_REPLY_PAYLOAD_LENGTH:
        raise ValidationError(
            f"quick_replies[{index}].payload exceeds {MAX_QUICK_REPLY_PAYLOAD_LENGTH} character limit"
        )


def validate_quick_replies(
    quick_replies: Sequence[QuickReply | Mapping[str, Any]],
) -> list[QuickReply]:
    """Valida lista de quick replies antes de montar o body.

    Args:
        quick_replies: QuickReply ou dicts (snake_case ou camelCase)

    Returns:
        Quick replies normalizadas

    Raises:
        ValidationError: Lista acima de 11 itens, título acima de 20
            caracteres ou payload acima de 1000 caracteres
    """
    if isinstance(quick_replies, (str, bytes)) or not isinstance(quick_replies, Sequence):
        raise ValidationError("quick_replies must be a list")

    if len(quick_replies) > MAX_QUICK_REPLIES:
        raise ValidationError(
            f"quick_replies list exceeds maximum of {MAX_QUICK_REPLIES} items"
        )

    parsed = [_parse_quick_reply(index, raw) for index, raw in enumerate(quick_replies)]
    for index, quick_reply in enumerate(parsed):
        if quick_reply.content_type == "text":
            _validate_text_quick_reply(index, quick_reply)
    return parsed


def validate_text(text: str) -> None:
    """Valida texto de mensagem (obrigatório, até 2000 caracteres)."""
    if not text:
        raise ValidationError("text is required")
    if len(text) > MAX_TEXT_LENGTH:
        raise ValidationError(f"text exceeds maximum length of {MAX_TEXT_LENGTH} characters")
