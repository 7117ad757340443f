"""Base model for typed views of collection items.

Collection stores keep the decoded payload untouched. These models are an
optional, read-only view on top of it:

* ``alias_generator=to_camel`` so camelCase JSON keys map to snake_case
  fields.
* ``extra="ignore"`` because the web service may add fields at any time.
* A ``raw`` dict that captures the original record.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from espclient.exceptions import EspPayloadError

# Threshold to distinguish seconds from milliseconds.
_MS_THRESHOLD = 1_000_000_000_000


def parse_esp_timestamp(value: Any) -> datetime | None:
    """Convert an epoch timestamp (seconds or milliseconds) or ISO string to a UTC datetime."""
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        if not stripped.lstrip("-").isdigit():
            parsed = datetime.fromisoformat(stripped.replace("Z", "+00:00"))
            return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=UTC)
        value = stripped
    ts = int(value)
    if ts >= _MS_THRESHOLD:
        ts = ts // 1000
    return datetime.fromtimestamp(ts, tz=UTC)


EspTimestamp = Annotated[datetime | None, BeforeValidator(parse_esp_timestamp)]
"""Annotated type accepting epoch ints (seconds or ms) and ISO-8601 strings."""


class EspBaseModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    raw: dict[str, Any] = Field(default_factory=dict)
    """Original record as returned by the web service."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict) or "raw" in values:
            return values
        return {**values, "raw": dict(values)}


M = TypeVar("M", bound=EspBaseModel)


def parse_items(model: type[M], items: Iterable[Any]) -> list[M]:
    """Validate every collection item as *model*.

    Raises
    ------
    EspPayloadError
        If an item is not an object or does not fit *model*.
    """
    parsed: list[M] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise EspPayloadError(f"Item {index} is {type(item).__name__}, expected an object")
        try:
            parsed.append(model.model_validate(item))
        except ValidationError as exc:
            raise EspPayloadError(f"Item {index} is not a valid {model.__name__}: {exc}") from exc
    return parsed
