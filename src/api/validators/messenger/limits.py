"""Limites declarados pela Messenger Platform."""

# https://developers.facebook.com/docs/messenger-platform/send-messages/quick-replies
MAX_QUICK_REPLIES = 11
MAX_QUICK_REPLY_TITLE_LENGTH = 20  # acima disso o título é truncado pela Meta
MAX_QUICK_REPLY_PAYLOAD_LENGTH = 1000

MAX_TEXT_LENGTH = 2000
