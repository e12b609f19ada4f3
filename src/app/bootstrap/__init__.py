"""Bootstrap: composition root dos clientes.

Configura logging e constrói as fachadas a partir das settings.

Uso:
    from app.bootstrap import configure_service_logging, create_messenger_client

    configure_service_logging()
    messenger = create_messenger_client()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.bootstrap.clients import (
    create_line_pay_client,
    create_messenger_client,
    create_twilio_client,
)
from config.logging import configure_logging
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import Callable


def configure_service_logging(
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON com nível e nome do serviço das BaseSettings.

    Deve ser chamada uma vez no início do processo.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=correlation_id_getter,
    )


__all__ = [
    "configure_service_logging",
    "create_line_pay_client",
    "create_messenger_client",
    "create_twilio_client",
]
