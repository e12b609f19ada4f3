"""Protocolos e contratos compartilhados pelos clientes."""

from .http_client import HttpTransportProtocol, OnRequestProtocol
from .models import (
    LinePayCurrency,
    MessagingType,
    QuickReply,
    Recipient,
    SenderAction,
    SendOptions,
    WireModel,
)

__all__ = [
    "HttpTransportProtocol",
    "LinePayCurrency",
    "MessagingType",
    "OnRequestProtocol",
    "QuickReply",
    "Recipient",
    "SendOptions",
    "SenderAction",
    "WireModel",
]
