"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    HttpError,
    MessagingApiError,
    RemoteApiError,
    TransformError,
    ValidationError,
)

__all__ = [
    "HttpError",
    "MessagingApiError",
    "RemoteApiError",
    "TransformError",
    "ValidationError",
]
