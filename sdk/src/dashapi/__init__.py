"""
dashapi - Python client for the crash reporting dashboard

Data structures used in dashboard communication and a client that uploads
builds, reports crashes and failed reproductions, and polls bug reports.
"""
# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.


from .client import Dashboard
from .models import (
    Build,
    Crash,
    FailedRepro,
    LogEntry,
    BugReport,
    BugUpdate,
    PollRequest,
    PollResponse,
    BugStatus,
    ReproLevel,
)
from .exceptions import (
    DashboardError,
    EncodingError,
    TransportError,
    RemoteError,
    DecodingError,
)
from .transport import query

__version__ = "0.1.0"
__all__ = [
    "Dashboard",
    "query",
    "Build",
    "Crash",
    "FailedRepro",
    "LogEntry",
    "BugReport",
    "BugUpdate",
    "PollRequest",
    "PollResponse",
    "BugStatus",
    "ReproLevel",
    "DashboardError",
    "EncodingError",
    "TransportError",
    "RemoteError",
    "DecodingError",
]
