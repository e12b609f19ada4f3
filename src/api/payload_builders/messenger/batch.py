"""Builders de sub-requests de batch para o Messenger.

Cada builder aceita um `access_token` opcional; quando presente ele vai no
body (POST) ou na query (GET) e é usado na prova HMAC daquele item.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import urlencode

from api.payload_builders.messenger.message import (
    QuickReplies,
    build_recipient,
    build_send_body,
    create_text,
)
from api.transforms.batch import BatchItem
from app.protocols.models import Recipient, SenderAction

DEFAULT_USER_PROFILE_FIELDS = ("id", "name", "first_name", "last_name", "profile_pic")

RecipientLike = str | Mapping[str, Any] | Recipient


def send_request(
    body: Mapping[str, Any],
    *,
    access_token: str | None = None,
    response_access_path: str | None = None,
) -> BatchItem:
    payload = dict(body)
    if access_token:
        payload["access_token"] = access_token
    return BatchItem(
        method="POST",
        relative_url="me/messages",
        body=payload,
        response_access_path=response_access_path,
    )


def send_message(
    recipient: RecipientLike,
    message: Mapping[str, Any],
    *,
    access_token: str | None = None,
    response_access_path: str | None = None,
    **options: Any,
) -> BatchItem:
    """Sub-request de envio de mensagem.

    Exemplo:
        send_message("USER_ID", {"text": "Hello"}, access_token="token1")
    """
    return send_request(
        build_send_body(recipient, message, options),
        access_token=access_token,
        response_access_path=response_access_path,
    )


def send_text(
    recipient: RecipientLike,
    text: str,
    *,
    quick_replies: QuickReplies = None,
    access_token: str | None = None,
    **options: Any,
) -> BatchItem:
    return send_message(
        recipient,
        create_text(text, quick_replies),
        access_token=access_token,
        **options,
    )


def send_sender_action(
    recipient: RecipientLike,
    sender_action: SenderAction,
    *,
    access_token: str | None = None,
) -> BatchItem:
    return send_request(
        {"recipient": build_recipient(recipient), "sender_action": sender_action},
        access_token=access_token,
    )


def mark_seen(recipient: RecipientLike, *, access_token: str | None = None) -> BatchItem:
    return send_sender_action(recipient, "mark_seen", access_token=access_token)


def typing_on(recipient: RecipientLike, *, access_token: str | None = None) -> BatchItem:
    return send_sender_action(recipient, "typing_on", access_token=access_token)


def typing_off(recipient: RecipientLike, *, access_token: str | None = None) -> BatchItem:
    return send_sender_action(recipient, "typing_off", access_token=access_token)


def get_user_profile(
    user_id: str,
    *,
    fields: Sequence[str] = DEFAULT_USER_PROFILE_FIELDS,
    access_token: str | None = None,
) -> BatchItem:
    """Sub-request GET de perfil; o token vai na query."""
    params = {"fields": ",".join(fields)}
    if access_token:
        params["access_token"] = access_token
    return BatchItem(method="GET", relative_url=f"{user_id}?{urlencode(params)}")
