"""Fetch completion outcomes and store lifecycle states."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from espclient.exceptions import EspError


class StoreStatus(StrEnum):
    PENDING = "pending"
    LOADED = "loaded"
    FAILED = "failed"
    DISPOSED = "disposed"


@dataclass(frozen=True, slots=True)
class FetchSucceeded:
    """The collection was fetched; *items* is the decoded array, untouched."""

    items: list[Any] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class FetchFailed:
    """The fetch failed at the transport or payload level."""

    error: EspError


FetchResult = FetchSucceeded | FetchFailed
