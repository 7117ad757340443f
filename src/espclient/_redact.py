"""Compact, credential-free renderings of collection payloads for DEBUG logs.

User records served next to students can carry passwords or tokens, and a
collection can hold thousands of records. Logs get a count plus a short,
masked sample instead of the payload itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_MASK = "<redacted>"

_SECRET_KEYS: frozenset[str] = frozenset(
    {
        "password",
        "passwordhash",
        "token",
        "accesstoken",
        "authorization",
        "cookie",
    }
)


def _is_secret(key: object) -> bool:
    return str(key).lower() in _SECRET_KEYS


def mask_record(record: Any, *, max_string: int = 120, depth: int = 0) -> Any:
    """Copy *record* with secret keys masked and long strings shortened."""
    if depth > 8:
        return "..."
    if isinstance(record, Mapping):
        return {
            str(key): _MASK if _is_secret(key) else mask_record(value, max_string=max_string, depth=depth + 1)
            for key, value in record.items()
        }
    if isinstance(record, list):
        return [mask_record(value, max_string=max_string, depth=depth + 1) for value in record]
    if isinstance(record, str) and len(record) > max_string:
        return f"{record[:max_string]}...(+{len(record) - max_string} chars)"
    if record is None or isinstance(record, (bool, int, float, str)):
        return record
    return f"<{type(record).__name__}>"


def summarize_collection(items: list[Any], *, sample_size: int = 3, max_string: int = 120) -> dict[str, Any]:
    """Return ``{"count": ..., "sample": [...]}`` for a fetched collection."""
    return {
        "count": len(items),
        "sample": [mask_record(item, max_string=max_string) for item in items[:sample_size]],
    }
