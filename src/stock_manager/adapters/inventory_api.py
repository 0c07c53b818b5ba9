"""Inventory backend HTTP adapter."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from stock_manager.services.multipart import MultipartPayload


class InventoryApi(Protocol):
    """Raw calls against the inventory backend.

    Implementations return the response whatever its status and let
    ``httpx.TransportError`` propagate when no response was obtained.
    """

    async def ping(self) -> httpx.Response:
        """Probe the API root."""

    async def sign_in(self, email: str, password: str) -> httpx.Response:
        """POST /auth/signin."""

    async def sign_up(self, email: str, password: str) -> httpx.Response:
        """POST /auth/signup."""

    async def get_profile(self, token: str) -> httpx.Response:
        """GET /auth/profile."""

    async def list_products(self, token: str) -> httpx.Response:
        """GET /products."""

    async def get_product(self, token: str, product_id: str) -> httpx.Response:
        """GET /products/:id."""

    async def create_product(
        self, token: str, payload: MultipartPayload
    ) -> httpx.Response:
        """POST /products as multipart."""

    async def update_product(
        self, token: str, product_id: str, payload: MultipartPayload
    ) -> httpx.Response:
        """PATCH /products/:id as multipart."""

    async def delete_product(self, token: str, product_id: str) -> httpx.Response:
        """DELETE /products/:id."""


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@dataclass
class HttpxInventoryApi(InventoryApi):
    """Inventory API implemented with httpx."""

    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str, timeout: float = 10.0) -> "HttpxInventoryApi":
        """Create an API adapter with a managed httpx session."""
        return cls(http_client=httpx.AsyncClient(base_url=base_url, timeout=timeout))

    async def ping(self) -> httpx.Response:
        """Probe the API root; any status counts as reachable."""
        return await self.http_client.get("/")

    async def sign_in(self, email: str, password: str) -> httpx.Response:
        """Exchange credentials for tokens."""
        return await self.http_client.post(
            "/auth/signin", json={"email": email, "password": password}
        )

    async def sign_up(self, email: str, password: str) -> httpx.Response:
        """Register a new account."""
        return await self.http_client.post(
            "/auth/signup", json={"email": email, "password": password}
        )

    async def get_profile(self, token: str) -> httpx.Response:
        """Fetch the signed-in user's profile."""
        return await self.http_client.get("/auth/profile", headers=_bearer(token))

    async def list_products(self, token: str) -> httpx.Response:
        """Fetch every product."""
        return await self.http_client.get("/products", headers=_bearer(token))

    async def get_product(self, token: str, product_id: str) -> httpx.Response:
        """Fetch a single product."""
        return await self.http_client.get(
            f"/products/{product_id}", headers=_bearer(token)
        )

    async def create_product(
        self, token: str, payload: MultipartPayload
    ) -> httpx.Response:
        """Create a product from a multipart payload."""
        return await self.http_client.post(
            "/products", headers=_bearer(token), files=payload.parts
        )

    async def update_product(
        self, token: str, product_id: str, payload: MultipartPayload
    ) -> httpx.Response:
        """Update a product from a multipart payload."""
        return await self.http_client.patch(
            f"/products/{product_id}", headers=_bearer(token), files=payload.parts
        )

    async def delete_product(self, token: str, product_id: str) -> httpx.Response:
        """Delete a product."""
        return await self.http_client.delete(
            f"/products/{product_id}", headers=_bearer(token)
        )

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()
