"""Exceptions raised by the KYC client.

Callers can tell apart three failure modes:
- ValidationError: the request was never sent (missing identifier)
- TransportError: no usable response came back (network failure or non-2xx)
- DecodeError: a response came back but its body is not JSON
"""


class KYCClientError(Exception):
    """Base exception for KYC client errors."""
    pass


class ValidationError(KYCClientError):
    """Raised when a required identifier is missing and no payload was given."""
    pass


class TransportError(KYCClientError):
    """Raised when the HTTP request fails before a usable response is received.

    Attributes:
        status_code: HTTP status when the failure is an error response, else None
        response_text: Body of the error response, if any
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
    ):
        super().__init__(f"Request error: {message}")
        self.status_code = status_code
        self.response_text = response_text


class DecodeError(KYCClientError):
    """Raised when a response body cannot be decoded as JSON."""

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
