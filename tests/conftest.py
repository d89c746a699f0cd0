"""Shared fixtures for KYC client tests."""
import json

import httpx
import pytest

BASE_URL = "https://api.youverify.test/v2/api/"
TOKEN = "test-token-123"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that records requests and counts close() calls."""

    def __init__(self, handler=None):
        self.requests: list[httpx.Request] = []
        self.close_count = 0
        self._respond = handler or (lambda request: httpx.Response(200, json={"success": True}))
        super().__init__(self._record)

    def _record(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    def close(self) -> None:
        self.close_count += 1

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)


@pytest.fixture
def recording_transport():
    """Transport answering every request with 200 {"success": true}."""
    return RecordingTransport()


@pytest.fixture
def make_transport():
    """Factory for a RecordingTransport with a custom handler.

    Usage:
        transport = make_transport(lambda request: httpx.Response(500))
    """
    def _make(handler):
        return RecordingTransport(handler)

    return _make
