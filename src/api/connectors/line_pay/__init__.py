"""Connector LINE Pay."""

from api.connectors.line_pay.client import LinePayClient, parse_line_pay_error

__all__ = [
    "LinePayClient",
    "parse_line_pay_error",
]
