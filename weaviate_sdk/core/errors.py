# weaviate_sdk/core/errors.py
# SPDX-License-Identifier: Apache-2.0
"""
Normalized error taxonomy for the Weaviate SDK.

Every failure surfaced by the client is a `WeaviateError` subclass carrying a
machine-readable `code` (UPPER_SNAKE_CASE) and a shallow, JSON-serializable
`details` mapping that is safe to log.

Kinds
-----
- TransportError:   connection, DNS, TLS or timeout failure below HTTP.
- RequestError:     the server answered with a non-2xx status.
- DecodeError:      a success body was not valid JSON or had the wrong shape.
- ValidationError:  malformed input detected locally, before any request.
- DeadlineExceeded: a completion poll exceeded its caller-supplied bound.

No error kind implies a retry; retrying is always the caller's decision.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional


class WeaviateError(Exception):
    """
    Base exception for all SDK errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (UPPER_SNAKE_CASE)
        details: Additional context-specific details (JSON-serializable)
    """

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = dict(details or {})

    def asdict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization and logging."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "code": self.code,
            "details": {k: self.details[k] for k in sorted(self.details)},
        }


# Subclasses set default `code` in UPPER_SNAKE_CASE where not explicitly provided.

class TransportError(WeaviateError):
    """The request never produced an HTTP response (network, DNS, timeout)."""
    def __init__(self, message: str, **kwargs: Any):
        kwargs.setdefault("code", "TRANSPORT_ERROR")
        super().__init__(message, **kwargs)


class RequestError(WeaviateError):
    """
    The server answered with a status outside 2xx.

    `body` is the raw response text exactly as received. `error_messages`
    holds the messages of Weaviate's `{"error": [{"message": ...}]}` envelope
    when the body happens to use it, and is empty otherwise.
    """
    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: str = "",
        **kwargs: Any,
    ):
        kwargs.setdefault("code", "REQUEST_ERROR")
        details = dict(kwargs.pop("details", None) or {})
        details.setdefault("status_code", status_code)
        super().__init__(message, details=details, **kwargs)
        self.status_code = status_code
        self.body = body
        self.error_messages: List[str] = _parse_error_messages(body)


class DecodeError(WeaviateError):
    """A response body did not match the expected JSON shape."""
    def __init__(self, message: str, **kwargs: Any):
        kwargs.setdefault("code", "DECODE_ERROR")
        super().__init__(message, **kwargs)


class ValidationError(WeaviateError):
    """Locally detectable malformed input; raised before any network call."""
    def __init__(self, message: str, **kwargs: Any):
        kwargs.setdefault("code", "VALIDATION_ERROR")
        super().__init__(message, **kwargs)


class DeadlineExceeded(WeaviateError):
    """
    A completion poll ran past its time or attempt bound.

    `last_status` is the last job status observed before giving up, so the
    caller can decide whether to keep waiting on its own.
    """
    def __init__(self, message: str, *, last_status: Any = None, **kwargs: Any):
        kwargs.setdefault("code", "DEADLINE_EXCEEDED")
        super().__init__(message, **kwargs)
        self.last_status = last_status


def _parse_error_messages(body: str) -> List[str]:
    if not body:
        return []
    try:
        payload = json.loads(body)
    except ValueError:
        return []
    if not isinstance(payload, Mapping):
        return []
    entries = payload.get("error")
    if not isinstance(entries, list):
        return []
    return [
        str(entry["message"])
        for entry in entries
        if isinstance(entry, Mapping) and "message" in entry
    ]


__all__ = [
    "WeaviateError",
    "TransportError",
    "RequestError",
    "DecodeError",
    "ValidationError",
    "DeadlineExceeded",
]
