"""High-level async client for the enrollment web service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import aiohttp

from espclient._api.collections import collection_path
from espclient._constants import COURSES_RESOURCE, STUDENTS_RESOURCE
from espclient._transport import HttpTransport, Transport
from espclient.config import EspConfig
from espclient.exceptions import EspError
from espclient.state.store import CollectionStore

_logger = logging.getLogger(__name__)


class EspClient:
    """Async client that hands out collection stores.

    Usage::

        async with EspClient(config) as client:
            students = client.students()
            await students.wait()
            print(students.items)

    A custom *transport* replaces the aiohttp transport entirely (no HTTP
    session is opened in that case).
    """

    def __init__(
        self,
        config: EspConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config if config is not None else EspConfig()
        self._external_session = session is not None
        self._http_session = session
        self._custom_transport = transport
        self._transport: Transport | None = transport
        self._pending: set[CollectionStore] = set()

    @property
    def config(self) -> EspConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> EspClient:
        if self._custom_transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        for store in list(self._pending):
            store.dispose()
        self._pending.clear()
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = self._custom_transport

    # ------------------------------------------------------------------
    # Stores
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise EspError("Client not initialized. Use 'async with EspClient(...) as client:'")
        return self._transport

    def collection(
        self,
        resource: str,
        *,
        on_change: Callable[[CollectionStore], None] | None = None,
    ) -> CollectionStore:
        """Create a store for ``<api_root>/<resource>``; its fetch starts immediately."""
        transport = self._require_transport()
        path = collection_path(resource, self._config.api_root)
        _logger.debug("Creating collection store for %s", path)
        store = CollectionStore(transport, path, on_change=on_change)
        self._pending.add(store)
        store.add_done_callback(self._pending.discard)
        return store

    def students(self, *, on_change: Callable[[CollectionStore], None] | None = None) -> CollectionStore:
        return self.collection(STUDENTS_RESOURCE, on_change=on_change)

    def courses(self, *, on_change: Callable[[CollectionStore], None] | None = None) -> CollectionStore:
        return self.collection(COURSES_RESOURCE, on_change=on_change)
