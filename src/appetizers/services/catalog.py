"""Catalog store driving the fetch state machine."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from appetizers.adapters.catalog_client import CatalogClient
from appetizers.domain.alerts import AlertItem, alert_for
from appetizers.domain.catalog import CatalogSnapshot, FetchState, Item
from appetizers.domain.errors import CatalogError, ErrorKind

_logger = logging.getLogger(__name__)

CatalogListener = Callable[[CatalogSnapshot], None]


@dataclass
class CatalogStore:
    """Observable owner of the catalog fetch lifecycle.

    ``request_fetch`` moves the store through Idle -> Loading -> Loaded or
    Failed. While a fetch is in flight further requests join it instead of
    issuing another network call. A failure discards the previous catalog.
    """

    client: CatalogClient
    _state: FetchState = field(default_factory=FetchState.idle, init=False)
    _selected_item: Item | None = field(default=None, init=False)
    _is_showing_detail: bool = field(default=False, init=False)
    _alert: AlertItem | None = field(default=None, init=False)
    _listeners: list[CatalogListener] = field(default_factory=list, init=False)
    _task: "asyncio.Task[FetchState] | None" = field(default=None, init=False)

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def items(self) -> tuple[Item, ...]:
        return self._state.items

    @property
    def selected_item(self) -> Item | None:
        return self._selected_item

    @property
    def is_showing_detail(self) -> bool:
        return self._is_showing_detail

    @property
    def alert(self) -> AlertItem | None:
        return self._alert

    def snapshot(self) -> CatalogSnapshot:
        """Return the current observable state as one value."""
        return CatalogSnapshot(
            state=self._state,
            selected_item=self._selected_item,
            is_showing_detail=self._is_showing_detail,
            alert=self._alert,
        )

    def subscribe(self, listener: CatalogListener) -> Callable[[], None]:
        """Register a listener called after every change; returns an unsubscriber."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def request_fetch(self) -> "asyncio.Task[FetchState]":
        """Start a catalog fetch, or return the one already in flight.

        Must be called from a running event loop.
        """
        if self._task is not None and not self._task.done():
            _logger.debug("Catalog fetch already in flight; joining it")
            return self._task
        # listeners reacting to Loading must find this task in flight
        task = asyncio.create_task(self._fetch())
        self._task = task
        self._set_state(FetchState.loading())
        return task

    async def refresh(self) -> FetchState:
        """Fetch the catalog and wait for the resulting state."""
        return await self.request_fetch()

    def cancel(self) -> bool:
        """Cancel an in-flight fetch and return to idle.

        Returns False when there was nothing to cancel.
        """
        if self._task is None or self._task.done():
            return False
        self._task.cancel()
        self._task = None
        self._set_state(FetchState.idle())
        return True

    def show_detail(self, item: Item) -> None:
        self._selected_item = item
        self._is_showing_detail = True
        self._notify()

    def hide_detail(self) -> None:
        self._is_showing_detail = False
        self._selected_item = None
        self._notify()

    def dismiss_alert(self) -> None:
        if self._alert is None:
            return
        self._alert = None
        self._notify()

    async def _fetch(self) -> FetchState:
        try:
            items = await self.client.fetch_catalog()
        except CatalogError as exc:
            _logger.warning("Catalog fetch failed: %s", exc)
            return self._fail(exc.kind)
        except Exception:
            _logger.exception("Unexpected catalog fetch failure")
            return self._fail(ErrorKind.INVALID_RESPONSE)
        _logger.info("Catalog loaded: items=%s", len(items))
        self._set_state(FetchState.loaded(items))
        return self._state

    def _fail(self, kind: ErrorKind) -> FetchState:
        self._alert = alert_for(kind)
        self._set_state(FetchState.failed(kind))
        return self._state

    def _set_state(self, state: FetchState) -> None:
        self._state = state
        self._notify()

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                _logger.exception("Catalog listener failed")
