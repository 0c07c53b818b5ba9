"""Backend reachability polling."""

import asyncio
import contextlib
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

import httpx

from stock_manager.adapters.inventory_api import InventoryApi

_logger = logging.getLogger(__name__)


@dataclass
class BackendHeartbeat:
    """Polls the API root on a fixed interval and tracks reachability.

    Any HTTP response counts as online, whatever its status; only a
    transport failure counts as offline. ``online`` is None until the first
    probe completes.
    """

    api: InventoryApi
    interval_seconds: float = 10.0
    on_change: Callable[[bool], None] | None = None
    online: bool | None = None
    _task: asyncio.Task[None] | None = field(default=None, init=False, repr=False)

    async def check(self) -> bool:
        """Run a single probe and record the outcome."""
        try:
            await self.api.ping()
        except httpx.TransportError:
            reachable = False
        else:
            reachable = True
        if reachable != self.online:
            _logger.info("Backend %s", "online" if reachable else "offline")
            self.online = reachable
            if self.on_change is not None:
                self.on_change(reachable)
        return reachable

    def start(self) -> None:
        """Begin polling; the first probe runs immediately."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def stop(self) -> None:
        """Stop polling and wait for the task to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    @property
    def running(self) -> bool:
        """Return True while the polling task is active."""
        return self._task is not None and not self._task.done()

    async def _run(self) -> None:
        while True:
            await self.check()
            await asyncio.sleep(self.interval_seconds)
