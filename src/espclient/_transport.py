"""HTTP transport for reading JSON collection resources."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import aiohttp

from espclient.config import EspConfig
from espclient.exceptions import EspTransportError

_logger = logging.getLogger(__name__)


def _preview(raw: bytes, limit: int = 200) -> str:
    return raw[:limit].decode("utf-8", errors="replace")


class Transport(Protocol):
    """Structural transport interface consumed by collection stores.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, path: str) -> Any:
        ...


class HttpTransport:
    """aiohttp-backed transport performing plain JSON GET requests."""

    def __init__(self, config: EspConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        if config.request_timeout > 0:
            self._timeout: aiohttp.ClientTimeout | None = aiohttp.ClientTimeout(total=config.request_timeout)
        else:
            self._timeout = None

    def url_for(self, path: str) -> str:
        return f"{self._config.base_url}{path}"

    async def get_json(self, path: str) -> Any:
        """GET *path* relative to the configured base URL and decode the JSON body.

        Raises
        ------
        EspTransportError
            On network errors, timeouts, a non-2xx status or a body that is
            not valid JSON.
        """
        url = self.url_for(path)
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }

        _logger.debug("GET %s", url)

        kwargs: dict[str, Any] = {"headers": headers}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        try:
            async with self._http.get(url, **kwargs) as resp:
                raw = await resp.read()
                if not 200 <= resp.status < 300:
                    raise EspTransportError(
                        f"HTTP {resp.status} from {path}: {_preview(raw)}",
                        status_code=resp.status,
                        endpoint=path,
                    )
                status = resp.status
        except EspTransportError:
            raise
        except TimeoutError as exc:
            raise EspTransportError(f"Request to {path} timed out", endpoint=path) from exc
        except aiohttp.ClientError as exc:
            raise EspTransportError(
                f"Request to {path} failed: {exc}",
                endpoint=path,
            ) from exc

        # JSON over HTTP is UTF-8; anything else is an unparseable body.
        try:
            body = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise EspTransportError(
                f"Invalid JSON from {path}: {_preview(raw)}",
                status_code=status,
                endpoint=path,
            ) from exc

        return body
