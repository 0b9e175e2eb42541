from __future__ import annotations

import asyncio
import concurrent.futures
import logging
from typing import List, Optional, Tuple

from common.config import FeedConfig
from common.decoder import decode
from common.models import Location
from common.transport import Transport, TransportError
from state.models import PresentationState

from .display import DisplaySurface


logger = logging.getLogger(__name__)


class LocationsPresenter:
    """
    Owns the locations presentation state and refreshes it from the feed.

    Notes
    - The presenter is bound to one asyncio event loop (passed in, or the loop
      running the first `refresh()`). State replacement and display
      notification only ever run on that loop. A closed or stopped owner is
      replaced by the loop of the next caller.
    - Fetching is awaited on the loop; JSON decoding runs in a worker thread.
    - Every failure (network, status, bad payload) ends as an empty list.
    - Overlapping refreshes are not coalesced: each one completes on its own
      and the last to finish wins.
    """

    def __init__(
        self,
        transport: Transport,
        config: FeedConfig,
        *,
        display: Optional[DisplaySurface] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        self._transport = transport
        self._config = config
        self._display = display
        self._loop = loop
        self._state = PresentationState.empty()

    # --------------- Public API ---------------
    def current_state(self) -> Tuple[Location, ...]:
        return self._state.items

    def snapshot(self) -> PresentationState:
        return self._state

    def attach(self, display: DisplaySurface) -> None:
        self._display = display

    async def refresh(self) -> None:
        """Fetch, decode, replace the state and notify the display once."""
        running = asyncio.get_running_loop()
        owner = self._loop
        if owner is not None and owner is not running and self._owner_alive():
            # Hop onto the owning loop so mutation stays on one context
            fut = asyncio.run_coroutine_threadsafe(self._refresh(), owner)
            await asyncio.wrap_future(fut)
            return
        # Unbound, or the previous owner is closed or stopped: adopt this loop
        self._loop = running
        await self._refresh()

    def schedule_refresh(self) -> concurrent.futures.Future:
        """Submit a refresh to the owning loop from any thread."""
        if not self._owner_alive():
            raise RuntimeError("Presenter is not bound to a running event loop")
        return asyncio.run_coroutine_threadsafe(self._refresh(), self._loop)  # type: ignore[arg-type]

    # --------------- Internal ---------------
    def _owner_alive(self) -> bool:
        loop = self._loop
        return loop is not None and not loop.is_closed() and loop.is_running()

    async def _refresh(self) -> None:
        items = await self._load()
        self._apply(items)

    async def _load(self) -> List[Location]:
        endpoint = self._config.endpoint
        try:
            raw = await self._transport.fetch(endpoint)
        except TransportError as exc:
            logger.warning("Fetch failed (%s), showing empty list: %s", type(exc).__name__, exc)
            return []
        return await asyncio.to_thread(
            decode, raw, self._config.list_key, self._config.field_keys
        )

    def _apply(self, items: List[Location]) -> None:
        self._state = self._state.replaced(items)
        logger.info("Presentation state v%d: %d locations", self._state.version, len(items))
        if self._display is not None:
            self._display.reload(self)


__all__ = ["LocationsPresenter"]
