"""Test configuration for CLI tests."""
# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.

import gzip
import json
from typing import List

import httpx
import pytest

from dashapi import Dashboard
from dashapi_cli.constants import ENV_ADDRESS, ENV_CLIENT, ENV_KEY, ENV_TIMEOUT
from dashapi_cli.exceptions import set_verbose


class MockServer:
    """Dashboard stand-in answering every request with a fixed reply."""

    def __init__(self):
        self.status_code = 200
        self.body = b""
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def payload(self, request: httpx.Request = None):
        """Decoded JSON body of a request, the last one by default."""
        request = request or self.last
        content = request.content
        if request.headers.get("Content-Encoding") == "gzip":
            content = gzip.decompress(content)
        return json.loads(content)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test with an empty home and project directory."""
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    for name in (ENV_CLIENT, ENV_ADDRESS, ENV_KEY, ENV_TIMEOUT):
        monkeypatch.delenv(name, raising=False)

    yield project

    set_verbose(False)


@pytest.fixture
def server(monkeypatch):
    """Patch the commands to talk to a mock dashboard."""
    mock = MockServer()
    clients = []

    def _create_dashboard(config):
        http_client = httpx.Client(transport=httpx.MockTransport(mock))
        clients.append(http_client)
        return Dashboard(
            "ci-manager",
            "https://dashboard.example.com",
            "s3cret",
            http_client=http_client,
        )

    monkeypatch.setattr("dashapi_cli.commands.report.create_dashboard", _create_dashboard)
    monkeypatch.setattr("dashapi_cli.commands.bugs.create_dashboard", _create_dashboard)

    yield mock

    for client in clients:
        client.close()
