"""HTTP clients for KYC verification services."""

from .base_client import HttpTransport
from .youverify_client import BVN_PATH, NIN_PATH, VNIN_PATH, VerificationClient

__all__ = ["BVN_PATH", "HttpTransport", "NIN_PATH", "VNIN_PATH", "VerificationClient"]
