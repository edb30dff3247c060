"""Conector Viber - cliente da Viber REST Bot API."""

from .client import ViberClient, create_viber_client, transform_message_case
from .models import VIBER_STATUS_OK, ViberEnvelope

__all__ = [
    "VIBER_STATUS_OK",
    "ViberClient",
    "ViberEnvelope",
    "create_viber_client",
    "transform_message_case",
]
