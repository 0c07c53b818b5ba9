"""Typed outcomes of resource operations."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

CONNECTIVITY_MESSAGE = "Cannot connect to server"
FORBIDDEN_MESSAGE = "You do not have permission to access this resource"
GENERIC_SAVE_MESSAGE = "Something went wrong while saving"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful operation carrying its value."""

    value: T


@dataclass(frozen=True)
class AuthExpired:
    """Session was missing or rejected; the caller must route to sign-in."""


@dataclass(frozen=True)
class Forbidden:
    """Authorization-scope failure; the session stays valid."""

    message: str = FORBIDDEN_MESSAGE


@dataclass(frozen=True)
class ValidationFailed:
    """Write rejected by the server or by a client-side precondition."""

    messages: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class NotFound:
    """Single resource does not exist."""


@dataclass(frozen=True)
class Connectivity:
    """No response was obtained from the server."""

    message: str = CONNECTIVITY_MESSAGE


@dataclass(frozen=True)
class Unknown:
    """Response did not match any known shape."""

    status_code: int | None = None
    message: str = "Unexpected server response"


ApiFailure = (
    AuthExpired | Forbidden | ValidationFailed | NotFound | Connectivity | Unknown
)
ApiResult = Ok[T] | ApiFailure
