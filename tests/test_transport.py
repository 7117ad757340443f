from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import aiohttp
import pytest

from espclient._transport import HttpTransport
from espclient.config import EspConfig
from espclient.exceptions import EspTransportError


class _FakeResponse:
    def __init__(self, status: int, body: bytes) -> None:
        self.status = status
        self._body = body

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self) -> _FakeResponse:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        return None


@dataclass
class FakeHttpSession:
    status: int = 200
    body: bytes = b"[]"
    error: Exception | None = None
    requests: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def get(self, url: str, **kwargs: Any) -> _FakeResponse:
        self.requests.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return _FakeResponse(self.status, self.body)


def _transport(session: FakeHttpSession, **config: Any) -> HttpTransport:
    return HttpTransport(EspConfig(base_url="http://esp.test", **config), session)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_get_json_decodes_array_body() -> None:
    session = FakeHttpSession(body=b'[{"id":1,"name":"Ada"},{"id":2,"name":"Alan"}]')

    body = await _transport(session).get_json("/api/v1.0/students")

    assert body == [{"id": 1, "name": "Ada"}, {"id": 2, "name": "Alan"}]
    url, kwargs = session.requests[0]
    assert url == "http://esp.test/api/v1.0/students"
    assert kwargs["headers"]["accept"] == "application/json"
    assert kwargs["headers"]["user-agent"] == "espclient/1"
    assert "params" not in kwargs
    assert "data" not in kwargs


@pytest.mark.asyncio
async def test_get_json_applies_configured_timeout() -> None:
    session = FakeHttpSession()

    await _transport(session, request_timeout=5.0).get_json("/api/v1.0/students")

    timeout = session.requests[0][1]["timeout"]
    assert isinstance(timeout, aiohttp.ClientTimeout)
    assert timeout.total == 5.0


@pytest.mark.asyncio
async def test_zero_timeout_leaves_session_default() -> None:
    session = FakeHttpSession()

    await _transport(session, request_timeout=0).get_json("/api/v1.0/students")

    assert "timeout" not in session.requests[0][1]


@pytest.mark.asyncio
async def test_non_2xx_status_raises_transport_error() -> None:
    session = FakeHttpSession(status=500, body=b"boom")

    with pytest.raises(EspTransportError) as exc_info:
        await _transport(session).get_json("/api/v1.0/students")

    assert exc_info.value.status_code == 500
    assert exc_info.value.endpoint == "/api/v1.0/students"


@pytest.mark.asyncio
async def test_2xx_other_than_200_is_accepted() -> None:
    session = FakeHttpSession(status=203, body=b"[1, 2]")

    assert await _transport(session).get_json("/api/v1.0/courses") == [1, 2]


@pytest.mark.asyncio
async def test_invalid_json_raises_transport_error() -> None:
    session = FakeHttpSession(body=b"<html>not json</html>")

    with pytest.raises(EspTransportError, match="Invalid JSON"):
        await _transport(session).get_json("/api/v1.0/students")


@pytest.mark.asyncio
async def test_non_utf8_body_raises_transport_error() -> None:
    session = FakeHttpSession(body=b'[{"name": "\xff\xfe"}]')

    with pytest.raises(EspTransportError, match="Invalid JSON") as exc_info:
        await _transport(session).get_json("/api/v1.0/students")

    assert exc_info.value.status_code == 200
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


@pytest.mark.asyncio
async def test_client_error_is_wrapped() -> None:
    session = FakeHttpSession(error=aiohttp.ClientConnectionError("connection refused"))

    with pytest.raises(EspTransportError, match="connection refused") as exc_info:
        await _transport(session).get_json("/api/v1.0/students")

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_timeout_is_wrapped() -> None:
    session = FakeHttpSession(error=TimeoutError())

    with pytest.raises(EspTransportError, match="timed out"):
        await _transport(session).get_json("/api/v1.0/students")


@pytest.mark.asyncio
async def test_configured_user_agent_is_sent() -> None:
    session = FakeHttpSession()

    await _transport(session, user_agent="enrollment-portal/2.0").get_json("/api/v1.0/students")

    assert session.requests[0][1]["headers"]["user-agent"] == "enrollment-portal/2.0"
