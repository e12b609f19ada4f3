"""Connector do Messenger (Graph API, Send API e batch)."""

from api.connectors.messenger.batch_queue import MessengerBatchQueue
from api.connectors.messenger.client import MessengerClient
from api.connectors.messenger.errors import (
    BatchRequestError,
    is_error_613,
    parse_graph_error,
)

__all__ = [
    "BatchRequestError",
    "MessengerBatchQueue",
    "MessengerClient",
    "is_error_613",
    "parse_graph_error",
]
