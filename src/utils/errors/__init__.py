"""Exceções utilitárias compartilhadas."""

from .exceptions import HttpError

__all__ = [
    "HttpError",
]
