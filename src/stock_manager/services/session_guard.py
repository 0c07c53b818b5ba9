"""Session validity state machine."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from stock_manager.adapters.credential_store import CredentialStore
from stock_manager.domain.session import Session

_logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Lifecycle states of the client session."""

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"
    EXPIRED = "expired"


@dataclass
class SessionGuard:
    """Decides whether the stored session is usable and invalidates it on rejection.

    ``state`` is derived from the store, so Expired is never a resting state;
    it is reported only as a transition, through the log and ``on_transition``.
    """

    store: CredentialStore
    on_transition: Callable[[SessionState, SessionState], None] | None = None

    @property
    def state(self) -> SessionState:
        """Return the current session state, derived from the store."""
        if self.store.load() is None:
            return SessionState.UNAUTHENTICATED
        return SessionState.AUTHENTICATED

    def current_token(self) -> str | None:
        """Return the access token of the stored session, if any."""
        session = self.store.load()
        return session.access_token if session else None

    def current_session(self) -> Session | None:
        """Return the stored session, if any."""
        return self.store.load()

    def establish(self, session: Session) -> None:
        """Move to Authenticated after a successful sign-in."""
        previous = self.state
        self.store.save(session)
        self._transition(previous, SessionState.AUTHENTICATED)

    def invalidate(self) -> None:
        """Expire the session and drop straight to Unauthenticated."""
        self._transition(self.state, SessionState.EXPIRED)
        self.store.clear()
        self._transition(SessionState.EXPIRED, SessionState.UNAUTHENTICATED)

    def logout(self) -> None:
        """Clear the session at the user's request."""
        previous = self.state
        self.store.clear()
        self._transition(previous, SessionState.UNAUTHENTICATED)

    def _transition(self, old: SessionState, new: SessionState) -> None:
        _logger.info("Session %s -> %s", old.value, new.value)
        if self.on_transition is not None:
            self.on_transition(old, new)
