"""Builders de mensagens da Send API do Messenger.

Quick replies são validadas aqui, antes de qualquer IO.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Literal

from pydantic import ValidationError as PydanticValidationError

from api.validators.messenger import validate_quick_replies, validate_text
from app.protocols.models import QuickReply, Recipient, SendOptions
from utils.errors import ValidationError

MediaType = Literal["audio", "image", "video", "file"]

QuickReplies = Sequence[QuickReply | Mapping[str, Any]] | None


def create_message(
    message: Mapping[str, Any],
    quick_replies: QuickReplies = None,
) -> dict[str, Any]:
    """Anexa quick replies validadas a uma mensagem.

    Raises:
        ValidationError: Se as quick replies violarem os limites
    """
    result = dict(message)
    if quick_replies:
        result["quick_replies"] = [qr.to_wire() for qr in validate_quick_replies(quick_replies)]
    return result


def create_text(text: str, quick_replies: QuickReplies = None) -> dict[str, Any]:
    validate_text(text)
    return create_message({"text": text}, quick_replies)


def create_attachment(
    attachment: Mapping[str, Any],
    quick_replies: QuickReplies = None,
) -> dict[str, Any]:
    return create_message({"attachment": dict(attachment)}, quick_replies)


def create_media(
    media_type: MediaType,
    url_or_payload: str | Mapping[str, Any],
    quick_replies: QuickReplies = None,
) -> dict[str, Any]:
    """Mensagem de mídia a partir de URL ou payload (ex: attachment_id)."""
    payload = {"url": url_or_payload} if isinstance(url_or_payload, str) else dict(url_or_payload)
    return create_attachment({"type": media_type, "payload": payload}, quick_replies)


def create_image(
    url_or_payload: str | Mapping[str, Any],
    quick_replies: QuickReplies = None,
) -> dict[str, Any]:
    return create_media("image", url_or_payload, quick_replies)


def create_audio(
    url_or_payload: str | Mapping[str, Any],
    quick_replies: QuickReplies = None,
) -> dict[str, Any]:
    return create_media("audio", url_or_payload, quick_replies)


def create_video(
    url_or_payload: str | Mapping[str, Any],
    quick_replies: QuickReplies = None,
) -> dict[str, Any]:
    return create_media("video", url_or_payload, quick_replies)


def create_file(
    url_or_payload: str | Mapping[str, Any],
    quick_replies: QuickReplies = None,
) -> dict[str, Any]:
    return create_media("file", url_or_payload, quick_replies)


def create_template(
    payload: Mapping[str, Any],
    quick_replies: QuickReplies = None,
) -> dict[str, Any]:
    return create_attachment({"type": "template", "payload": dict(payload)}, quick_replies)


def build_recipient(recipient: str | Mapping[str, Any] | Recipient) -> dict[str, Any]:
    """Normaliza destinatário: string vira `{"id": ...}`."""
    if isinstance(recipient, str):
        return {"id": recipient}
    if isinstance(recipient, Recipient):
        return recipient.to_wire()
    try:
        return Recipient.model_validate(dict(recipient)).to_wire()
    except PydanticValidationError as exc:
        raise ValidationError(f"recipient is invalid: {exc.errors()[0]['msg']}") from exc


def build_send_body(
    recipient: str | Mapping[str, Any] | Recipient,
    message: Mapping[str, Any],
    options: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Monta o body de `me/messages`.

    `messaging_type` padrão é UPDATE, ou MESSAGE_TAG quando há `tag`.
    """
    try:
        parsed = SendOptions.model_validate(dict(options or {}))
    except PydanticValidationError as exc:
        raise ValidationError(f"send options are invalid: {exc.errors()[0]['msg']}") from exc

    extra = parsed.to_wire()
    messaging_type = extra.pop("messaging_type", None) or (
        "MESSAGE_TAG" if parsed.tag else "UPDATE"
    )
    return {
        "messaging_type": messaging_type,
        "recipient": build_recipient(recipient),
        "message": dict(message),
        **extra,
    }
