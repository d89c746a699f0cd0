"""YouVerify client for Nigerian identity verification.

Sends NIN, vNIN and BVN lookups to the YouVerify identity API.
Reference: https://doc.youverify.co/
"""
import logging
from typing import Any, Mapping

import httpx

from .base_client import HttpTransport, JSONValue
from ..core.settings import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_TIMEOUT,
    YouVerifySettings,
    get_settings,
)
from ..models import BVNPayload, NINPayload, VNINPayload, VerificationPayload, resolve_payload

logger = logging.getLogger(__name__)

NIN_PATH = "identity/ng/nin"
VNIN_PATH = "identity/ng/vnin"
BVN_PATH = "identity/ng/bvn"


class VerificationClient:
    """Client for YouVerify KYC endpoints.

    Each verify_* method sends a single POST and returns the decoded response
    unchanged; the verification outcome is not interpreted.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the client. No request is made here.

        Args:
            base_url: YouVerify API base address (e.g. https://api.youverify.co/v2/api/)
            token: API token sent in the 'token' header
            timeout: Read/write/pool timeout in seconds
            connect_timeout: Connection timeout in seconds
            transport: Optional httpx transport, passed through to HttpTransport
        """
        self._token = token
        self.http = HttpTransport(
            base_url,
            timeout=timeout,
            connect_timeout=connect_timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: YouVerifySettings | None = None, **kwargs) -> "VerificationClient":
        """Build a client from YOUVERIFY_* settings.

        Keyword arguments (timeout, connect_timeout, transport) override the
        values taken from settings.

        Raises:
            ValueError: If no token is configured
        """
        settings = settings or get_settings()
        if settings.token is None or not settings.token.get_secret_value():
            raise ValueError("YOUVERIFY_TOKEN is not configured")

        options = {
            "timeout": settings.timeout,
            "connect_timeout": settings.connect_timeout,
            **kwargs,
        }
        return cls(settings.base_url, settings.token.get_secret_value(), **options)

    def headers(self) -> dict[str, str]:
        """Build the headers sent with every request."""
        return {
            "Accept": "application/json",
            "token": self._token,
            "Content-Type": "application/json",
        }

    def _verify(
        self,
        label: str,
        model: type[VerificationPayload],
        identifier: str | None,
        path: str,
        data: Mapping[str, Any] | None,
    ) -> JSONValue:
        if data and identifier:
            logger.debug("%s argument ignored: explicit payload supplied", label)

        payload = resolve_payload(label, identifier, data, model)
        return self.http.post(path, self.headers(), payload)

    def verify_nin(
        self,
        nin: str | None = None,
        path: str = NIN_PATH,
        data: Mapping[str, Any] | None = None,
    ) -> JSONValue:
        """Verify a National Identification Number (premium lookup, subject consent given).

        Args:
            nin: The NIN to verify
            path: Endpoint path relative to the base address
            data: Complete payload to send instead of the default one

        Returns:
            Decoded JSON response

        Raises:
            ValidationError: If neither nin nor data is given
            TransportError: If the request fails
            DecodeError: If the response is not JSON
        """
        return self._verify("NIN", NINPayload, nin, path, data)

    def verify_vnin(
        self,
        vnin: str | None = None,
        path: str = VNIN_PATH,
        data: Mapping[str, Any] | None = None,
    ) -> JSONValue:
        """Verify a virtual NIN (subject consent given).

        Same arguments and errors as verify_nin.
        """
        return self._verify("vNIN", VNINPayload, vnin, path, data)

    def verify_bvn(
        self,
        bvn: str | None = None,
        path: str = BVN_PATH,
        data: Mapping[str, Any] | None = None,
    ) -> JSONValue:
        """Verify a Bank Verification Number.

        The default payload requests the premium record and carries a fresh
        metadata.requestId on every call.
        """
        return self._verify("BVN", BVNPayload, bvn, path, data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.http.base_url!r})"
