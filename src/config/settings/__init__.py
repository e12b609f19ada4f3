"""Agregador de settings.

Re-exporta as settings de cada provedor. Um arquivo por provedor para
isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.line_pay import LinePaySettings, get_line_pay_settings
from config.settings.messenger import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    MessengerSettings,
    get_messenger_settings,
)
from config.settings.twilio import TWILIO_API_BASE_URL, TwilioSettings, get_twilio_settings

__all__ = [
    # Constants
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    "TWILIO_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Providers
    "LinePaySettings",
    "MessengerSettings",
    "TwilioSettings",
    "get_base_settings",
    "get_line_pay_settings",
    "get_messenger_settings",
    "get_twilio_settings",
]
