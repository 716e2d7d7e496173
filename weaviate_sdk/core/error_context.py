# weaviate_sdk/core/error_context.py
# SPDX-License-Identifier: Apache-2.0

"""
Error context utilities for the Weaviate SDK.

Errors raised while talking to the server are enriched with a small,
log-safe context mapping (operation name, HTTP method, request path, ...)
stored as an exception attribute. The exception type and message are left
untouched so callers can keep matching on them.

Typical usage
-------------

    from weaviate_sdk.core.error_context import attach_context

    try:
        response = await client.send(request)
    except WeaviateError as exc:
        attach_context(exc, operation="objects.get", method="GET", path=path)
        raise

Later, in error handlers or observability systems:

    except WeaviateError as exc:
        context = get_context(exc)
        logger.warning("call failed", extra=dict(context))

Context is append-only across layers: a later `attach_context()` call adds
keys but never removes the ones set closer to the failure. Never put API
keys, property values or other payload data in the context.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, MutableMapping

logger = logging.getLogger(__name__)

CONTEXT_ATTR = "__weaviate_context__"


def attach_context(exc: BaseException, **context: Any) -> None:
    """
    Attach structured context to an exception as it propagates.

    Keys already present on the exception win over new ones with the same
    name, so the innermost layer's view of the failure is preserved.

    Parameters
    ----------
    exc:
        The exception to enrich. It is modified in place.

    **context:
        Low-cardinality, JSON-serializable key/value pairs such as
        ``operation="schema.get_class"``, ``method="GET"``, ``path="/v1/schema/Article"``.
    """
    merged: MutableMapping[str, Any] = {}
    existing = getattr(exc, CONTEXT_ATTR, None)
    for key, value in context.items():
        merged[key] = value
    if isinstance(existing, Mapping):
        merged.update(existing)
    try:
        setattr(exc, CONTEXT_ATTR, merged)
    except AttributeError as attachment_error:
        # Some builtin exceptions reject new attributes; the error still propagates.
        logger.debug(
            "Failed to attach error context to %s: %s",
            type(exc).__name__,
            attachment_error,
        )


def get_context(exc: BaseException) -> Mapping[str, Any]:
    """
    Retrieve attached context from an exception.

    Returns an empty mapping when nothing was attached.
    """
    ctx = getattr(exc, CONTEXT_ATTR, None)
    if isinstance(ctx, Mapping):
        return ctx
    return {}


def has_context(exc: BaseException) -> bool:
    """Check if an exception carries non-empty attached context."""
    return len(get_context(exc)) > 0


def clear_context(exc: BaseException) -> None:
    """
    Remove attached context from an exception.

    Mostly useful in tests, or before serializing an exception somewhere
    the context should not travel.
    """
    if hasattr(exc, CONTEXT_ATTR):
        delattr(exc, CONTEXT_ATTR)


__all__ = [
    "attach_context",
    "get_context",
    "has_context",
    "clear_context",
]
