"""Validadores para chamadas de pagamento LINE Pay."""

from __future__ import annotations

from typing import Any

from utils.errors import ValidationError

SUPPORTED_CURRENCIES = frozenset({"USD", "JPY", "TWD", "THB"})


def validate_payment_lookup(
    operation: str,
    transaction_id: str | None,
    order_id: str | None,
) -> None:
    """Consultas exigem transaction_id ou order_id."""
    if not transaction_id and not order_id:
        raise ValidationError(
            f"{operation}: one of transaction_id or order_id must be provided"
        )


def validate_amount(amount: Any, currency: str) -> None:
    """Valida valor positivo e moeda suportada."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)) or amount <= 0:
        raise ValidationError("amount must be a positive number")
    if currency not in SUPPORTED_CURRENCIES:
        raise ValidationError(
            f"currency must be one of {', '.join(sorted(SUPPORTED_CURRENCIES))}"
        )


def validate_reserve_request(
    *,
    product_name: str,
    amount: Any,
    currency: str,
    confirm_url: str,
    order_id: str,
) -> None:
    """Valida campos obrigatórios de uma reserva de pagamento."""
    for field_name, value in (
        ("product_name", product_name),
        ("confirm_url", confirm_url),
        ("order_id", order_id),
    ):
        if not value:
            raise ValidationError(f"{field_name} is required")
    validate_amount(amount, currency)
