"""Validadores da API LINE Pay."""

from api.validators.line_pay.payments import (
    SUPPORTED_CURRENCIES,
    validate_amount,
    validate_payment_lookup,
    validate_reserve_request,
)

__all__ = [
    "SUPPORTED_CURRENCIES",
    "validate_amount",
    "validate_payment_lookup",
    "validate_reserve_request",
]
