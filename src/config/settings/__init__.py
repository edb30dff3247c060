"""Agregador de settings.

Re-exporta as settings de cada cliente. Um arquivo por plataforma
para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.messenger import (
    GRAPH_API_ORIGIN,
    GRAPH_API_VERSION,
    MessengerSettings,
    extract_version,
    get_messenger_settings,
)
from config.settings.telegram import (
    TELEGRAM_API_ORIGIN,
    TelegramSettings,
    get_telegram_settings,
)
from config.settings.viber import (
    VIBER_API_ORIGIN,
    ViberSettings,
    get_viber_settings,
)

__all__ = [
    # Constants
    "GRAPH_API_ORIGIN",
    "GRAPH_API_VERSION",
    "TELEGRAM_API_ORIGIN",
    "VIBER_API_ORIGIN",
    # Base
    "BaseSettings",
    "Environment",
    # Platforms
    "MessengerSettings",
    "TelegramSettings",
    "ViberSettings",
    "extract_version",
    "get_base_settings",
    "get_messenger_settings",
    "get_telegram_settings",
    "get_viber_settings",
]
