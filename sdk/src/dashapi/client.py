"""
Dashboard client facade.

Binds a client identity (name, address, shared key) to the dashboard API
methods, one typed method per remote operation.
"""
# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.


import logging
from typing import Any, Optional, Type

import httpx

from .exceptions import DashboardError
from .models import (
    Build,
    BugUpdate,
    Crash,
    FailedRepro,
    LogEntry,
    PollRequest,
    PollResponse,
)
from .transport import ReplyT, query


logger = logging.getLogger(__name__)


class Dashboard:
    """
    Client for the dashboard API.

    The identity fields are fixed at construction, so one instance can be
    shared by several threads as long as each call owns its own records.

    Args:
        client: Client name registered on the dashboard
        addr: Dashboard base address (e.g., "https://dashboard.example.com")
        key: Shared key of the client
        http_client: Optional HTTP client to use. When omitted the dashboard
            creates its own and closes it in close().
        timeout: Timeout in seconds for the client created by the dashboard
    """

    def __init__(
        self,
        client: str,
        addr: str,
        key: str,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
    ):
        self._client_name = client
        self._addr = addr.rstrip("/")
        self._key = key
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(timeout=timeout, follow_redirects=True)
        self._http = http_client

    @property
    def client(self) -> str:
        return self._client_name

    @property
    def addr(self) -> str:
        return self._addr

    @property
    def key(self) -> str:
        return self._key

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"Dashboard(client={self._client_name!r}, addr={self._addr!r})"

    def close(self):
        """Close the HTTP client if the dashboard created it."""
        if self._owns_http_client:
            self._http.close()

    def _query(
        self,
        method: str,
        request: Any = None,
        reply_type: Optional[Type[ReplyT]] = None,
    ) -> Optional[ReplyT]:
        return query(
            self._client_name,
            self._addr,
            self._key,
            method,
            request,
            reply_type,
            http_client=self._http,
        )

    def upload_build(self, build: Build) -> None:
        """Upload metadata of a new kernel build."""
        self._query("upload_build", build)

    def report_crash(self, crash: Crash) -> None:
        """Report a kernel crash, with reproducers if there are any."""
        self._query("report_crash", crash)

    def report_failed_repro(self, repro: FailedRepro) -> None:
        """Report that reproducing a crash failed."""
        self._query("report_failed_repro", repro)

    def log_error(self, name: str, text: str) -> None:
        """
        Send an error message to the dashboard's centralized log.

        Best effort: dashboard failures are logged locally and not raised.

        Args:
            name: Name of the reporting component
            text: Already formatted message
        """
        entry = LogEntry(name=name, text=text)
        try:
            self._query("log_error", entry)
        except DashboardError as e:
            logger.warning(f"Failed to send error log '{name}' to dashboard: {e}")

    def poll(self, request: PollRequest) -> PollResponse:
        """Fetch bug reports pending external reporting."""
        return self._query("reporting_poll", request, PollResponse)

    def update_bug(self, update: BugUpdate) -> None:
        """Send a status update for a reported bug."""
        self._query("reporting_update", update)
