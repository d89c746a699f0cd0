"""Client library for YouVerify KYC identity verification."""

from .clients import HttpTransport, VerificationClient
from .core import (
    DecodeError,
    KYCClientError,
    TransportError,
    ValidationError,
    YouVerifySettings,
    get_settings,
)
from .models import BVNPayload, NINPayload, VNINPayload, generate_request_id

__all__ = [
    "BVNPayload",
    "DecodeError",
    "HttpTransport",
    "KYCClientError",
    "NINPayload",
    "TransportError",
    "VNINPayload",
    "ValidationError",
    "VerificationClient",
    "YouVerifySettings",
    "generate_request_id",
    "get_settings",
]
