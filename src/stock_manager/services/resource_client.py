"""Session-guarded client for every product and auth operation."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from stock_manager.adapters.inventory_api import InventoryApi
from stock_manager.domain.products import ProductFields, ProductRecord
from stock_manager.domain.results import (
    GENERIC_SAVE_MESSAGE,
    ApiFailure,
    ApiResult,
    AuthExpired,
    Connectivity,
    Forbidden,
    NotFound,
    Ok,
    Unknown,
    ValidationFailed,
)
from stock_manager.domain.session import Session, UserProfile
from stock_manager.services.error_messages import response_messages
from stock_manager.services.multipart import build_product_payload
from stock_manager.services.session_guard import SessionGuard

_logger = logging.getLogger(__name__)

_UNAUTHORIZED = 401
_FORBIDDEN = 403
_NOT_FOUND = 404
_SERVER_ERROR = 500


@dataclass
class ResourceClient:
    """Single choke point for authenticated and auth calls.

    Every protected call asks the session guard for a token first and never
    touches the network without one. A 401 from any call invalidates the
    session and is returned as ``AuthExpired``; navigation is left to the
    caller.
    """

    api: InventoryApi
    guard: SessionGuard
    min_password_length: int = 8

    async def sign_in(self, email: str, password: str) -> ApiResult[Session]:
        """Sign in and persist the returned tokens."""
        response = await self._send(
            "sign_in", lambda: self.api.sign_in(email, password)
        )
        if isinstance(response, Connectivity):
            return response
        if not response.is_success:
            return ValidationFailed(response_messages(response, "Login failed"))
        body = _json_or_none(response)
        access_token = body.get("access_token") if isinstance(body, dict) else None
        if not isinstance(access_token, str) or not access_token:
            _logger.warning("sign_in response carried no access token")
            return Unknown(response.status_code, "Login failed")
        refresh_token = body.get("refresh_token")
        session = Session(
            access_token=access_token,
            refresh_token=refresh_token if isinstance(refresh_token, str) else None,
        )
        self.guard.establish(session)
        return Ok(session)

    async def sign_up(self, email: str, password: str) -> ApiResult[None]:
        """Register an account; the caller routes to sign-in on success."""
        if len(password) < self.min_password_length:
            return ValidationFailed(
                [f"Password must be at least {self.min_password_length} characters"]
            )
        response = await self._send(
            "sign_up", lambda: self.api.sign_up(email, password)
        )
        if isinstance(response, Connectivity):
            return response
        if not response.is_success:
            return ValidationFailed(response_messages(response, "Signup failed"))
        return Ok(None)

    async def fetch_profile(self) -> ApiResult[UserProfile]:
        """Fetch the profile; any rejection invalidates the session."""
        response = await self._authorized("fetch_profile", self.api.get_profile)
        if not isinstance(response, httpx.Response):
            return response
        body = _json_or_none(response) if response.is_success else None
        if not isinstance(body, dict) or "userId" not in body:
            _logger.warning("fetch_profile failed with status %s", response.status_code)
            self.guard.invalidate()
            return AuthExpired()
        return Ok(
            UserProfile(
                user_id=str(body["userId"]),
                email=str(body.get("email", "")),
                role=str(body.get("role", "")),
            )
        )

    async def list_products(self) -> ApiResult[list[ProductRecord]]:
        """Fetch the product catalog."""
        response = await self._authorized("list_products", self.api.list_products)
        if not isinstance(response, httpx.Response):
            return response
        if response.status_code == _FORBIDDEN:
            return Forbidden()
        if not response.is_success:
            _logger.warning(
                "list_products failed: %s %s",
                response.status_code,
                response.reason_phrase,
            )
            return Unknown(response.status_code)
        body = _json_or_none(response)
        if not isinstance(body, list):
            _logger.warning("list_products returned a non-list body")
            return Unknown(response.status_code)
        try:
            return Ok([ProductRecord.model_validate(item) for item in body])
        except ValidationError:
            _logger.warning("list_products returned malformed products", exc_info=True)
            return Unknown(response.status_code)

    async def get_product(self, product_id: str) -> ApiResult[ProductRecord]:
        """Fetch a single product."""
        _require_id(product_id)
        response = await self._authorized(
            "get_product", lambda token: self.api.get_product(token, product_id)
        )
        if not isinstance(response, httpx.Response):
            return response
        if response.status_code == _NOT_FOUND:
            return NotFound()
        if response.status_code == _FORBIDDEN:
            return Forbidden()
        if not response.is_success:
            _logger.warning(
                "get_product %s failed with status %s", product_id, response.status_code
            )
            return Unknown(response.status_code)
        record = _parse_record(response)
        return Ok(record) if record else Unknown(response.status_code)

    async def create_product(
        self, fields: ProductFields
    ) -> ApiResult[ProductRecord | None]:
        """Create a product from fields, color tags and images."""
        payload = build_product_payload(fields)
        response = await self._authorized(
            "create_product", lambda token: self.api.create_product(token, payload)
        )
        return _write_result(response)

    async def update_product(
        self, product_id: str, fields: ProductFields
    ) -> ApiResult[ProductRecord | None]:
        """Update a product; non-empty images replace all existing ones."""
        _require_id(product_id)
        payload = build_product_payload(fields)
        response = await self._authorized(
            "update_product",
            lambda token: self.api.update_product(token, product_id, payload),
        )
        return _write_result(response)

    async def delete_product(self, product_id: str) -> ApiResult[None]:
        """Delete a product."""
        _require_id(product_id)
        response = await self._authorized(
            "delete_product", lambda token: self.api.delete_product(token, product_id)
        )
        if not isinstance(response, httpx.Response):
            return response
        if response.is_success:
            return Ok(None)
        if response.status_code == _FORBIDDEN:
            return Forbidden()
        if response.status_code == _NOT_FOUND:
            return NotFound()
        _logger.warning(
            "delete_product %s failed with status %s", product_id, response.status_code
        )
        return Unknown(response.status_code)

    async def _authorized(
        self,
        action: str,
        call: Callable[[str], Awaitable[httpx.Response]],
    ) -> httpx.Response | ApiFailure:
        token = self.guard.current_token()
        if token is None:
            _logger.info("%s skipped: no session", action)
            return AuthExpired()
        response = await self._send(action, lambda: call(token))
        if isinstance(response, Connectivity):
            return response
        if response.status_code == _UNAUTHORIZED:
            self.guard.invalidate()
            return AuthExpired()
        return response

    async def _send(
        self, action: str, call: Callable[[], Awaitable[httpx.Response]]
    ) -> httpx.Response | Connectivity:
        try:
            return await call()
        except httpx.TransportError as exc:
            _logger.warning("%s failed: cannot reach server (%s)", action, exc)
            return Connectivity()


def _require_id(product_id: str) -> None:
    if not product_id:
        raise ValueError("product_id must not be empty")


def _json_or_none(response: httpx.Response) -> object | None:
    try:
        return response.json()
    except ValueError:
        return None


def _parse_record(response: httpx.Response) -> ProductRecord | None:
    body = _json_or_none(response)
    if not isinstance(body, dict):
        return None
    try:
        return ProductRecord.model_validate(body)
    except ValidationError:
        _logger.warning("Malformed product in response", exc_info=True)
        return None


def _write_result(
    response: httpx.Response | ApiFailure,
) -> ApiResult[ProductRecord | None]:
    if not isinstance(response, httpx.Response):
        return response
    if response.is_success:
        return Ok(_parse_record(response))
    if response.status_code == _FORBIDDEN:
        return Forbidden()
    if response.status_code == _NOT_FOUND:
        return NotFound()
    messages = response_messages(response, GENERIC_SAVE_MESSAGE)
    if response.status_code >= _SERVER_ERROR:
        _logger.warning("Product write failed with status %s", response.status_code)
        return Unknown(response.status_code, messages[0])
    return ValidationFailed(messages)
