"""Conector Messenger - cliente da Messenger Platform (Graph API)."""

from .client import MessengerClient, app_secret_proof, create_messenger_client
from .models import GraphApiError, parse_graph_error

__all__ = [
    "GraphApiError",
    "MessengerClient",
    "app_secret_proof",
    "create_messenger_client",
    "parse_graph_error",
]
