"""Conector Telegram - cliente da Telegram Bot API."""

from .client import TelegramClient, create_telegram_client
from .models import TelegramEnvelope

__all__ = [
    "TelegramClient",
    "TelegramEnvelope",
    "create_telegram_client",
]
