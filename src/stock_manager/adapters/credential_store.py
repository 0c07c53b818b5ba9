"""Persistent storage for session credentials."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from stock_manager.domain.session import Session

ACCESS_TOKEN_KEY = "accessToken"
REFRESH_TOKEN_KEY = "refreshToken"

_logger = logging.getLogger(__name__)


class CredentialStore(Protocol):
    """Key-value storage for the current session."""

    def save(self, session: Session) -> None:
        """Persist the session, replacing any previous one."""

    def load(self) -> Session | None:
        """Return the stored session, if any."""

    def clear(self) -> None:
        """Remove any stored session."""


@dataclass
class InMemoryCredentialStore(CredentialStore):
    """Credential store that lives for the process only."""

    session: Session | None = None

    def save(self, session: Session) -> None:
        """Keep the session in memory."""
        self.session = session

    def load(self) -> Session | None:
        """Return the in-memory session."""
        return self.session

    def clear(self) -> None:
        """Forget the in-memory session."""
        self.session = None


@dataclass
class FileCredentialStore(CredentialStore):
    """Credential store backed by a JSON file in the user profile.

    Unreadable or malformed storage is reported as "no session"; write
    failures are logged and leave the process logged out rather than crash.
    """

    path: Path

    def save(self, session: Session) -> None:
        """Write the tokens under their storage keys."""
        payload: dict[str, str] = {ACCESS_TOKEN_KEY: session.access_token}
        if session.refresh_token:
            payload[REFRESH_TOKEN_KEY] = session.refresh_token
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload), encoding="utf-8")
        except OSError:
            _logger.warning("Credential storage unavailable at %s", self.path)

    def load(self) -> Session | None:
        """Read the stored tokens, treating any storage problem as no session."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError):
            _logger.warning("Credential storage unreadable at %s", self.path)
            return None
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError:
            _logger.warning("Credential storage corrupt at %s", self.path)
            return None
        if not isinstance(payload, dict):
            return None
        access_token = payload.get(ACCESS_TOKEN_KEY)
        if not isinstance(access_token, str) or not access_token:
            return None
        refresh_token = payload.get(REFRESH_TOKEN_KEY)
        return Session(
            access_token=access_token,
            refresh_token=refresh_token if isinstance(refresh_token, str) else None,
        )

    def clear(self) -> None:
        """Delete the credentials file."""
        try:
            self.path.unlink(missing_ok=True)
        except OSError:
            _logger.warning("Failed to clear credential storage at %s", self.path)
