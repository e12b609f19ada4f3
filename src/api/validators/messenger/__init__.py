"""Validadores de limites da Messenger Platform.

Uso:
    from api.validators.messenger import validate_quick_replies

    quick_replies = validate_quick_replies(raw_quick_replies)
"""

from api.validators.messenger.limits import (
    MAX_QUICK_REPLIES,
    MAX_QUICK_REPLY_PAYLOAD_LENGTH,
    MAX_QUICK_REPLY_TITLE_LENGTH,
    MAX_TEXT_LENGTH,
)
from api.validators.messenger.quick_replies import validate_quick_replies, validate_text

__all__ = [
    "MAX_QUICK_REPLIES",
    "MAX_QUICK_REPLY_PAYLOAD_LENGTH",
    "MAX_QUICK_REPLY_TITLE_LENGTH",
    "MAX_TEXT_LENGTH",
    "validate_quick_replies",
    "validate_text",
]
