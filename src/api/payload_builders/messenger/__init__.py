"""Builders de payload para a Send API e batch do Messenger."""

from api.payload_builders.messenger import batch
from api.payload_builders.messenger.message import (
    build_recipient,
    build_send_body,
    create_attachment,
    create_audio,
    create_file,
    create_image,
    create_media,
    create_message,
    create_template,
    create_text,
    create_video,
)

__all__ = [
    "batch",
    "build_recipient",
    "build_send_body",
    "create_attachment",
    "create_audio",
    "create_file",
    "create_image",
    "create_media",
    "create_message",
    "create_template",
    "create_text",
    "create_video",
]
