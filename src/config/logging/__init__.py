"""Configuração de logging estruturado (JSON via python-json-logger).

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime
"""

from config.logging.config import VALID_LOG_LEVELS, configure_logging, get_logger
from config.logging.filters import (
    SecretRedactionFilter,
    ServiceContextFilter,
    redact_secrets,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "VALID_LOG_LEVELS",
    "SecretRedactionFilter",
    "ServiceContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "redact_secrets",
]
