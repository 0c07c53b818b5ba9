"""Shared screen-controller plumbing."""

from dataclasses import dataclass, field
from enum import Enum

from stock_manager.domain.results import AuthExpired
from stock_manager.services.resource_client import ResourceClient


class Route(Enum):
    """Screens a controller can ask the caller to navigate to."""

    LOGIN = "/auth/login"
    SIGNUP = "/auth/signup"
    PRODUCT_LIST = "/product"
    PRODUCT_CREATE = "/product/create"
    PRODUCT_DETAIL = "/product/detail"
    PRODUCT_EDIT = "/product/edit"
    PROFILE = "/profile"


@dataclass
class ScreenController:
    """Base for screens driven by resource-client results.

    Completions are applied only while the screen is mounted and on the same
    mount generation that issued the request, so a response arriving after
    navigation away never mutates view state.
    """

    client: ResourceClient
    mounted: bool = False
    navigate_to: Route | None = None
    _generation: int = field(default=0, init=False, repr=False)

    def mount(self) -> None:
        """Mark the screen as current."""
        self.mounted = True
        self.navigate_to = None
        self._generation += 1
        self._reset()

    def unmount(self) -> None:
        """Mark the screen as abandoned; in-flight completions are dropped."""
        self.mounted = False
        self._generation += 1

    def _reset(self) -> None:
        """Clear transient view state left by requests from an earlier mount."""

    def _ticket(self) -> int | None:
        return self._generation if self.mounted else None

    def _is_current(self, ticket: int | None) -> bool:
        return ticket is not None and self.mounted and ticket == self._generation

    def _redirect_if_expired(self, result: object) -> bool:
        if isinstance(result, AuthExpired):
            self.navigate_to = Route.LOGIN
            return True
        return False
