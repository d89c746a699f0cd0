"""Core settings and exceptions."""

from .exceptions import DecodeError, KYCClientError, TransportError, ValidationError
from .settings import YouVerifySettings, get_settings

__all__ = [
    "DecodeError",
    "KYCClientError",
    "TransportError",
    "ValidationError",
    "YouVerifySettings",
    "get_settings",
]
