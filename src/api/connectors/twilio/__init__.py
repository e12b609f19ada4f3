"""Connector Twilio (SMS/WhatsApp)."""

from api.connectors.twilio.client import MessageListInstance, TwilioClient, parse_twilio_error

__all__ = [
    "MessageListInstance",
    "TwilioClient",
    "parse_twilio_error",
]
