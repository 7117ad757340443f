"""Custom exception hierarchy for espclient."""

from __future__ import annotations


class EspError(Exception):
    """Base exception for all espclient errors."""


class EspConfigError(EspError):
    """Invalid or missing configuration."""


class EspTransportError(EspError):
    """HTTP-level failure (network, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class EspPayloadError(EspError):
    """The response decoded fine but is not a collection.

    Raised when a collection endpoint answers with JSON that is not an
    array (an object, a scalar, ``null``).
    """

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)
