"""
Single round trip to the dashboard API.

``query`` posts one JSON document to ``<addr>/api`` and decodes the reply.
It keeps no state between calls; the HTTP client is always supplied by the
caller so tests can swap in ``httpx.MockTransport``.
"""
# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.


import gzip
import json
import logging
from typing import Any, Optional, Type, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from .exceptions import (
    DecodingError,
    EncodingError,
    ErrorContext,
    TransportError,
    from_http_error,
)


logger = logging.getLogger(__name__)

ReplyT = TypeVar("ReplyT", bound=BaseModel)

# Payloads below this size are not worth compressing.
COMPRESSION_THRESHOLD = 100

# The local development server does not understand gzip request bodies.
LOCAL_DEV_PREFIX = "http://localhost:"


def encode_request(request: Any) -> bytes:
    """Serialize a request payload to JSON bytes."""
    try:
        if isinstance(request, BaseModel):
            return request.model_dump_json(by_alias=True).encode("utf-8")
        return json.dumps(request).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise EncodingError(f"failed to marshal request: {e}", original_exception=e)


def should_compress(data: bytes, addr: str) -> bool:
    """Whether a serialized payload is sent gzip-compressed to ``addr``."""
    if len(data) < COMPRESSION_THRESHOLD:
        return False
    if not addr or addr.startswith(LOCAL_DEV_PREFIX):
        return False
    return True


def build_url(client: str, addr: str, key: str, method: str) -> str:
    """Build the API endpoint URL with its identity parameters."""
    values = urlencode([("client", client), ("key", key), ("method", method)])
    return f"{addr}/api?{values}"


def _redacted_url(client: str, addr: str, method: str) -> str:
    return build_url(client, addr, "***", method)


def query(
    client: str,
    addr: str,
    key: str,
    method: str,
    request: Any = None,
    reply_type: Optional[Type[ReplyT]] = None,
    *,
    http_client: httpx.Client,
) -> Optional[ReplyT]:
    """
    Call a dashboard API method.

    Args:
        client: Client name registered on the dashboard
        addr: Dashboard base address, e.g. "https://dashboard.example.com".
            An empty address produces a relative URL resolved against the
            ``base_url`` of ``http_client``.
        key: Shared key of the client
        method: Dashboard API method name, e.g. "upload_build"
        request: Optional request payload (pydantic record or JSON-serializable value)
        reply_type: Optional pydantic model to decode the reply into
        http_client: HTTP client used for the exchange

    Returns:
        Decoded reply, or None when no reply_type is given

    Raises:
        EncodingError: If the request cannot be serialized
        TransportError: If the HTTP exchange cannot be completed
        RemoteError: If the dashboard answers with a non-200 status
        DecodingError: If the reply is not valid JSON for reply_type
    """
    content = None
    headers = {}
    if request is not None:
        data = encode_request(request)
        headers["Content-Type"] = "application/json"
        compressed = should_compress(data, addr)
        if compressed:
            content = gzip.compress(data)
            headers["Content-Encoding"] = "gzip"
        else:
            content = data
        logger.debug(
            f"Calling {method}: {len(data)} bytes{', gzipped' if compressed else ''}"
        )
    else:
        logger.debug(f"Calling {method} without a request body")

    url = build_url(client, addr, key, method)
    safe_url = _redacted_url(client, addr, method)
    context = ErrorContext(url=safe_url, method=method)

    try:
        http_request = http_client.build_request("POST", url, content=content, headers=headers)
        response = http_client.send(http_request)
    except (httpx.RequestError, httpx.InvalidURL, OSError) as e:
        logger.debug(f"HTTP request for {method} failed: {e}")
        raise TransportError(f"http request failed: {e}", context=context, original_exception=e)

    try:
        if response.status_code != httpx.codes.OK:
            raise from_http_error(
                response.status_code,
                response.reason_phrase,
                response.text,
                safe_url,
                method=method,
            )

        if reply_type is None:
            return None

        try:
            return reply_type.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodingError(
                f"failed to unmarshal response: {e}", context=context, original_exception=e
            )
    finally:
        response.close()
