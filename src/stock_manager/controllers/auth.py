"""Sign-in, sign-up and profile screens."""

from dataclasses import dataclass, field

from stock_manager.controllers.base import Route, ScreenController
from stock_manager.domain.results import Connectivity, Ok, Unknown, ValidationFailed
from stock_manager.domain.session import UserProfile


def _failure_messages(result: object) -> list[str]:
    if isinstance(result, ValidationFailed):
        return list(result.messages)
    if isinstance(result, Connectivity | Unknown):
        return [result.message]
    return ["Unexpected error"]


@dataclass
class LoginController(ScreenController):
    """Sign-in form."""

    email: str = ""
    password: str = ""
    errors: list[str] = field(default_factory=list)
    loading: bool = False

    def _reset(self) -> None:
        self.loading = False
        self.errors = []

    async def submit(self) -> None:
        """Sign in and route to the product list on success."""
        ticket = self._ticket()
        if ticket is None:
            return
        self.loading = True
        self.errors = []
        result = await self.client.sign_in(self.email, self.password)
        if not self._is_current(ticket):
            return
        self.loading = False
        if isinstance(result, Ok):
            self.navigate_to = Route.PRODUCT_LIST
            return
        self.errors = _failure_messages(result)


@dataclass
class SignupController(ScreenController):
    """Sign-up form."""

    email: str = ""
    password: str = ""
    errors: list[str] = field(default_factory=list)
    loading: bool = False

    def _reset(self) -> None:
        self.loading = False
        self.errors = []

    async def submit(self) -> None:
        """Register and route to sign-in on success."""
        ticket = self._ticket()
        if ticket is None:
            return
        self.loading = True
        self.errors = []
        result = await self.client.sign_up(self.email, self.password)
        if not self._is_current(ticket):
            return
        self.loading = False
        if isinstance(result, Ok):
            self.navigate_to = Route.LOGIN
            return
        self.errors = _failure_messages(result)


@dataclass
class ProfileController(ScreenController):
    """Profile screen with logout."""

    profile: UserProfile | None = None
    notice: str | None = None
    loading: bool = False

    def _reset(self) -> None:
        self.loading = False
        self.notice = None

    async def load(self) -> None:
        """Fetch the profile; a rejected session routes to sign-in."""
        ticket = self._ticket()
        if ticket is None:
            return
        self.loading = True
        result = await self.client.fetch_profile()
        if not self._is_current(ticket):
            return
        self.loading = False
        if self._redirect_if_expired(result):
            return
        if isinstance(result, Ok):
            self.profile = result.value
            self.notice = None
        elif isinstance(result, Connectivity):
            self.notice = result.message

    def logout(self) -> None:
        """Drop the session and route to sign-in."""
        self.client.guard.logout()
        self.profile = None
        self.navigate_to = Route.LOGIN
