"""Contratos canônicos de payloads outbound.

Os modelos aceitam campos em snake_case ou camelCase (alias) e são
serializados em snake_case para o wire.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

QuickReplyContentType = Literal["text", "user_phone_number", "user_email"]
MessagingType = Literal["RESPONSE", "UPDATE", "MESSAGE_TAG", "NON_PROMOTIONAL_SUBSCRIPTION"]
SenderAction = Literal["mark_seen", "typing_on", "typing_off"]
LinePayCurrency = Literal["USD", "JPY", "TWD", "THB"]


class WireModel(BaseModel):
    """Base com alias camelCase e população por nome."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class QuickReply(WireModel):
    """Quick reply do Messenger.

    Limites (título, payload, quantidade) são checados pelos validators,
    não pelo modelo, para que a mensagem de erro nomeie o limite.
    """

    content_type: QuickReplyContentType = "text"
    title: str | None = None
    payload: str | None = None
    image_url: str | None = None


class Recipient(WireModel):
    """Destinatário de uma mensagem (PSID, user_ref, phone_number...)."""

    id: str | None = None
    user_ref: str | None = None
    phone_number: str | None = None
    comment_id: str | None = None
    post_id: str | None = None


class SendOptions(WireModel):
    """Opções de envio da Send API."""

    messaging_type: MessagingType | None = None
    tag: str | None = None
    notification_type: Literal["REGULAR", "SILENT_PUSH", "NO_PUSH"] | None = None
    persona_id: str | None = None
    access_token: str | None = None
