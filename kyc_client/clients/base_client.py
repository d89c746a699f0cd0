"""Base HTTP transport for KYC verification services.

Wraps httpx behind a small GET/POST/PUT/PATCH/DELETE interface bound to a
base address. Every request opens its own httpx client and closes it before
returning, whether the request succeeded or not.
"""
import logging
from typing import Any, Mapping

import httpx

from ..core.exceptions import DecodeError, TransportError
from ..core.settings import DEFAULT_CONNECT_TIMEOUT, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

# Methods that carry a JSON request body
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})
SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})

# Decoded JSON value: dict, list, str, int, float, bool or None
JSONValue = Any


class HttpTransport:
    """HTTP transport bound to a fixed base address.

    Network failures and non-2xx responses raise TransportError. Bodies that
    are not valid JSON raise DecodeError.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the transport.

        Args:
            base_url: Address that request paths are appended to
            timeout: Read/write/pool timeout in seconds
            connect_timeout: Connection timeout in seconds
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self._base_url = base_url
        self._timeout = httpx.Timeout(timeout, connect=connect_timeout)
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def _open_client(self, base_url: str = "") -> httpx.Client:
        # Environment proxy settings only apply to the default transport
        return httpx.Client(
            base_url=base_url,
            timeout=self._timeout,
            transport=self._transport,
            follow_redirects=True,
            trust_env=self._transport is None,
        )

    def _send(
        self,
        client: httpx.Client,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        params: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send one request and return the fully read response.

        Raises:
            ValueError: If the method is not supported
            TransportError: On network failure or a non-2xx status
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        kwargs: dict[str, Any] = {"headers": dict(headers or {})}
        if method in BODY_METHODS:
            kwargs["json"] = body if body is not None else {}
        if params:
            kwargs["params"] = dict(params)

        logger.debug("%s %s", method, url)
        try:
            response = client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "%s %s failed with status %d", method, url, e.response.status_code
            )
            raise TransportError(
                str(e),
                status_code=e.response.status_code,
                response_text=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, type(e).__name__)
            raise TransportError(str(e) or type(e).__name__) from e

        return response

    def _call(
        self,
        method: str,
        path: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        params: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        client = self._open_client(self._base_url)
        try:
            return self._send(client, method, path, headers, body, params)
        finally:
            client.close()

    @staticmethod
    def _decode(response: httpx.Response) -> JSONValue:
        try:
            return response.json()
        except ValueError as e:
            body = response.text
            logger.warning(
                "Response from %s is not valid JSON (status %d)",
                response.request.url,
                response.status_code,
            )
            raise DecodeError(
                f"Invalid JSON response: {e}; body: {body[:200]!r}",
                status_code=response.status_code,
                body=body,
            ) from e

    def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> bytes:
        """Make a request to a full URL and return the raw response body.

        The base address is not applied. POST, PUT and PATCH send `body` as
        JSON; GET and DELETE send no body.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH or DELETE)
            url: Absolute URL
            headers: Request headers
            body: JSON-serializable request body

        Returns:
            Raw response body bytes

        Raises:
            TransportError: On network failure or a non-2xx status
        """
        client = self._open_client()
        try:
            return self._send(client, method, url, headers, body).content
        finally:
            client.close()

    def get(
        self,
        path: str,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
    ) -> JSONValue:
        """Make a GET request with optional query parameters and decode the JSON body."""
        return self._decode(self._call("GET", path, headers, params=params))

    def post(
        self,
        path: str,
        headers: Mapping[str, str] | None = None,
        data: Any = None,
    ) -> JSONValue:
        """Make a POST request with JSON data and decode the JSON body."""
        return self._decode(self._call("POST", path, headers, data))

    def put(
        self,
        path: str,
        headers: Mapping[str, str] | None = None,
        data: Any = None,
    ) -> JSONValue:
        """Make a PUT request with JSON data and decode the JSON body."""
        return self._decode(self._call("PUT", path, headers, data))

    def patch(
        self,
        path: str,
        headers: Mapping[str, str] | None = None,
        data: Any = None,
    ) -> JSONValue:
        """Make a PATCH request with JSON data and decode the JSON body."""
        return self._decode(self._call("PATCH", path, headers, data))

    def delete(self, path: str, headers: Mapping[str, str] | None = None) -> int:
        """Make a DELETE request and return the status code. The body is ignored."""
        return self._call("DELETE", path, headers).status_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"
