"""Observable store for one remote collection resource.

A :class:`CollectionStore` issues exactly one GET when it is created and
publishes the decoded array on :attr:`CollectionStore.items` once the
request completes. Presentation code reads ``items`` whenever it renders;
``on_change`` is available for hosts that want to schedule a re-render.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from espclient._api.collections import fetch_collection
from espclient._transport import Transport
from espclient.exceptions import EspError
from espclient.state.events import FetchFailed, FetchResult, FetchSucceeded, StoreStatus

_logger = logging.getLogger(__name__)


class CollectionStore:
    """Holds the items of one collection resource.

    Usage::

        store = CollectionStore(transport, "/api/v1.0/students")
        store.items      # [] until the fetch completes
        await store.wait()
        store.items      # [{"id": 1, "name": "Ada"}, ...]

    The constructor never blocks and must run inside an event loop (or be
    handed one through *loop*). Failures never raise out of the store; they
    leave ``items`` untouched and are recorded on :attr:`last_error`.
    """

    def __init__(
        self,
        transport: Transport,
        resource_path: str,
        *,
        on_change: Callable[[CollectionStore], None] | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self.items: list[Any] = []
        self.last_error: EspError | None = None
        self.status = StoreStatus.PENDING
        self._transport = transport
        self._resource_path = resource_path
        self._on_change = on_change
        self._result: FetchResult | None = None
        self._settled = False
        self._disposed = False

        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as exc:
                raise EspError(
                    "CollectionStore must be created inside a running event loop or be given one"
                ) from exc
        self._task: asyncio.Task[FetchResult] = loop.create_task(
            fetch_collection(transport, resource_path),
            name=f"espclient-fetch:{resource_path}",
        )
        self._task.add_done_callback(self._on_task_done)

    @property
    def resource_path(self) -> str:
        return self._resource_path

    @property
    def is_loaded(self) -> bool:
        return self.status == StoreStatus.LOADED

    @property
    def is_pending(self) -> bool:
        return self.status == StoreStatus.PENDING

    @property
    def disposed(self) -> bool:
        return self._disposed

    def add_done_callback(self, callback: Callable[[CollectionStore], None]) -> None:
        """Call *callback* with this store once its fetch finishes or is cancelled."""
        self._task.add_done_callback(lambda _task: callback(self))

    def dispose(self) -> None:
        """Mark the store inert; a completion arriving later is ignored.

        A store that already settled keeps its ``LOADED``/``FAILED`` status,
        ``items`` and ``last_error``. Only a pending store moves to
        ``DISPOSED``.
        """
        if self._disposed:
            return
        if self._task.done():
            # The done callback may still be queued; settle before going inert.
            self._on_task_done(self._task)
        self._disposed = True
        if self.status == StoreStatus.PENDING:
            self.status = StoreStatus.DISPOSED
            self._task.cancel()

    async def wait(self) -> FetchResult | None:
        """Wait for the fetch to complete and return its outcome.

        Returns ``None`` when the store was disposed before completion.
        Never raises for fetch failures.
        """
        try:
            await asyncio.shield(self._task)
        except asyncio.CancelledError:
            if not self._task.cancelled():
                raise
        # The done callback may still be queued behind this coroutine.
        self._on_task_done(self._task)
        return self._result

    def _on_task_done(self, task: asyncio.Task[FetchResult]) -> None:
        if self._settled:
            return
        self._settled = True
        if task.cancelled():
            _logger.debug("Fetch of %s cancelled", self._resource_path)
            return
        self._complete(task.result())

    def _complete(self, result: FetchResult) -> None:
        if self._disposed:
            _logger.debug("Ignoring completion for disposed store %s", self._resource_path)
            return

        self._result = result
        if isinstance(result, FetchSucceeded):
            self.items = result.items
            self.last_error = None
            self.status = StoreStatus.LOADED
        elif isinstance(result, FetchFailed):
            self.last_error = result.error
            self.status = StoreStatus.FAILED

        if self._on_change is not None:
            try:
                self._on_change(self)
            except Exception:  # noqa: BLE001
                _logger.debug("on_change callback failed for %s", self._resource_path, exc_info=True)

    def __repr__(self) -> str:
        return f"<CollectionStore {self._resource_path} status={self.status} items={len(self.items)}>"
