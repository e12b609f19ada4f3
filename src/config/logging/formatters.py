"""Formatter JSON dos logs estruturados.

Campos obrigatórios: asctime, level, logger, message, correlation_id e
service. Campos passados em `extra` (provider, endpoint, status_code...)
são anexados ao objeto JSON.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-02-02 10:30:00,000",
            "level": "WARNING",
            "logger": "api.connectors.remote_logging",
            "message": "remote_api_error",
            "correlation_id": "",
            "service": "messaging-api-clients",
            "provider": "Messenger",
            "status_code": 400
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
