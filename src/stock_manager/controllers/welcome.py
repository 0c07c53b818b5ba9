"""Landing screen showing backend reachability."""

from dataclasses import dataclass

from stock_manager.controllers.base import ScreenController
from stock_manager.services.heartbeat import BackendHeartbeat


@dataclass
class WelcomeController(ScreenController):
    """Runs the heartbeat for as long as the screen is mounted."""

    heartbeat: BackendHeartbeat | None = None

    @property
    def backend_online(self) -> bool | None:
        """Return the last known reachability, or None before the first probe."""
        return self.heartbeat.online if self.heartbeat else None

    def mount(self) -> None:
        """Mark the screen current and start polling."""
        super().mount()
        if self.heartbeat is not None:
            self.heartbeat.start()

    async def teardown(self) -> None:
        """Unmount and stop polling."""
        self.unmount()
        if self.heartbeat is not None:
            await self.heartbeat.stop()
