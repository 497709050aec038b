# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.

import gzip
import json
from typing import Any, Callable, List, Optional

import httpx
import pytest

from dashapi import Dashboard


class RequestRecorder:
    """Mock dashboard server that records every request it receives."""

    def __init__(self, status_code: int = 200, body: bytes = b""):
        self.status_code = status_code
        self.body = body
        self.requests: List[httpx.Request] = []
        self.responses: List[httpx.Response] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = httpx.Response(self.status_code, content=self.body)
        self.responses.append(response)
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def request_body(self, request: Optional[httpx.Request] = None) -> bytes:
        """Uncompressed body of a request, the last one by default."""
        request = request or self.last
        if request.headers.get("Content-Encoding") == "gzip":
            return gzip.decompress(request.content)
        return request.content

    def payload(self, request: Optional[httpx.Request] = None) -> Any:
        """Decoded JSON document of a request, the last one by default."""
        return json.loads(self.request_body(request))


@pytest.fixture
def recorder():
    """Server answering 200 with an empty body."""
    return RequestRecorder()


@pytest.fixture
def make_recorder():
    """Build mock servers with a fixed status code and body."""
    return RequestRecorder


@pytest.fixture
def make_http_client():
    """Build httpx clients backed by a mock transport and close them afterwards."""
    clients = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler), **kwargs)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def make_dashboard(make_http_client):
    """Build a Dashboard talking to a mock server."""

    def _make(handler, addr: str = "https://dashboard.example.com", **kwargs) -> Dashboard:
        return Dashboard(
            "ci-manager",
            addr,
            "s3cret",
            http_client=make_http_client(handler, **kwargs),
        )

    return _make


@pytest.fixture
def failing_handler():
    """Transport handler that can never reach the server."""

    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return _handler
