"""Collection endpoints: ``GET <api_root>/<resource>``.

Builds resource paths and turns one transport call into a
:data:`~espclient.state.events.FetchResult`.
"""

from __future__ import annotations

import logging
from typing import Any

from espclient._constants import API_ROOT, is_valid_resource_name
from espclient._redact import summarize_collection
from espclient._transport import Transport
from espclient.exceptions import EspConfigError, EspError, EspPayloadError, EspTransportError
from espclient.state.events import FetchFailed, FetchResult, FetchSucceeded

_logger = logging.getLogger(__name__)


def collection_path(resource: str, api_root: str = API_ROOT) -> str:
    """Return the path of a collection resource, e.g. ``/api/v1.0/students``.

    Raises
    ------
    EspConfigError
        If *resource* is empty, padded with whitespace, or contains
        ``/``, ``?`` or ``#``.
    """
    if not is_valid_resource_name(resource):
        raise EspConfigError(f"Invalid collection resource name: {resource!r}")
    return f"{api_root.rstrip('/')}/{resource}"


def parse_collection(body: Any, endpoint: str) -> list[Any]:
    """Validate a decoded response body as a collection.

    The items are returned as-is; no element is inspected or converted.
    """
    if not isinstance(body, list):
        raise EspPayloadError(
            f"Expected a JSON array from {endpoint}, got {type(body).__name__}",
            endpoint=endpoint,
        )
    return body


async def fetch_collection(transport: Transport, path: str) -> FetchResult:
    """Perform the single GET for a collection and wrap the outcome.

    Never raises for fetch failures: every error becomes a
    :class:`FetchFailed`. Cancellation still propagates.
    """
    try:
        body = await transport.get_json(path)
        items = parse_collection(body, path)
    except EspError as exc:
        _logger.debug("Collection fetch from %s failed: %s", path, exc)
        return FetchFailed(error=exc)
    except Exception as exc:  # noqa: BLE001
        _logger.debug("Collection fetch from %s raised unexpectedly", path, exc_info=True)
        return FetchFailed(
            error=EspTransportError(f"Request to {path} failed: {exc!r}", endpoint=path),
        )

    if _logger.isEnabledFor(logging.DEBUG):
        _logger.debug("Collection %s loaded: %s", path, summarize_collection(items))
    return FetchSucceeded(items=items)
