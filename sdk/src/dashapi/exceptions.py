"""
Exceptions raised by the dashboard API client.

Every failure of a dashboard call maps onto one of four terminal errors:
the request could not be encoded, the HTTP exchange could not complete,
the server answered with a non-200 status, or the reply could not be decoded.
"""
# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.


import json
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, asdict, field


@dataclass
class ErrorContext:
    """Context information attached to dashboard errors."""
    url: Optional[str] = None
    method: Optional[str] = None
    response_data: Optional[Dict[str, Any]] = None
    suggested_fixes: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)


class DashboardError(Exception):
    """Base exception for all dashboard API errors."""

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()
        self.original_exception = original_exception

    def get_summary(self) -> str:
        """Get a summary of the error with key details."""
        parts = [self.message]

        if self.context.method:
            parts.append(f"method: {self.context.method}")

        return " | ".join(parts)

    def get_detailed_info(self) -> Dict[str, Any]:
        """Get detailed error information for rich display."""
        info = {
            "message": self.message,
            "type": self.__class__.__name__,
        }

        if self.context:
            info.update(self.context.to_dict())

        return info

    def __str__(self) -> str:
        return self.get_summary()


class EncodingError(DashboardError):
    """The request payload could not be serialized to JSON."""


class TransportError(DashboardError):
    """The HTTP exchange could not be completed."""

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        original_exception: Optional[Exception] = None
    ):
        if context is None:
            context = ErrorContext()

        if not context.suggested_fixes:
            context.suggested_fixes = [
                "Check that the dashboard address is correct and reachable",
                "Verify network connectivity, DNS and proxy settings",
            ]

        super().__init__(message, context, original_exception)


class RemoteError(DashboardError):
    """The dashboard answered with a status other than 200 OK."""

    def __init__(
        self,
        message: str,
        status_code: int,
        reason: str = "",
        response_text: Optional[str] = None,
        context: Optional[ErrorContext] = None,
        original_exception: Optional[Exception] = None
    ):
        if context is None:
            context = ErrorContext()

        # Parse response data if it's JSON
        if response_text:
            try:
                context.response_data = json.loads(response_text)
            except (json.JSONDecodeError, TypeError):
                context.response_data = {"raw": response_text}

        super().__init__(message, context, original_exception)
        self.status_code = status_code
        self.reason = reason
        self.response_text = response_text or ""

    @property
    def status(self) -> str:
        """Status line in the form "403 Forbidden"."""
        return f"{self.status_code} {self.reason}".strip()

    def get_summary(self) -> str:
        return f"HTTP {self.status}: {self.message}"


class DecodingError(DashboardError):
    """The reply body is not valid JSON for the expected reply type."""


def from_http_error(
    status_code: int,
    reason: str,
    response_text: str,
    url: str,
    method: Optional[str] = None
) -> RemoteError:
    """
    Create a RemoteError from a non-200 dashboard response.

    Args:
        status_code: HTTP status code
        reason: HTTP reason phrase
        response_text: Response body text
        url: Request URL that failed, with the key already redacted
        method: Dashboard API method name

    Returns:
        RemoteError carrying the status and body for diagnostics
    """
    context = ErrorContext(url=url, method=method)

    if status_code in (401, 403):
        context.suggested_fixes = [
            "Check the client name and shared key registered on the dashboard",
        ]
    elif status_code == 404:
        context.suggested_fixes = [
            "Check the dashboard address",
            f"Check that the dashboard supports the '{method}' method",
        ]
    elif status_code >= 500:
        context.suggested_fixes = [
            "The dashboard failed to process the request, check its logs",
        ]

    status = f"{status_code} {reason}".strip()
    return RemoteError(
        message=f"request failed with {status}: {response_text}",
        status_code=status_code,
        reason=reason,
        response_text=response_text,
        context=context
    )
