"""Domain models for authenticated sessions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """Pair of tokens proving an authenticated identity to the backend."""

    access_token: str
    refresh_token: str | None = None

    def __post_init__(self) -> None:
        if not self.access_token:
            raise ValueError("Session requires a non-empty access token")


@dataclass(frozen=True)
class UserProfile:
    """Profile of the signed-in user."""

    user_id: str
    email: str
    role: str
