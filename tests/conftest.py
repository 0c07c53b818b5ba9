"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field

import httpx
import pytest

from stock_manager.adapters.credential_store import InMemoryCredentialStore
from stock_manager.adapters.inventory_api import HttpxInventoryApi
from stock_manager.config import Settings
from stock_manager.domain.session import Session
from stock_manager.services.resource_client import ResourceClient
from stock_manager.services.session_guard import SessionGuard

BASE_URL = "http://api.test"

Handler = Callable[[httpx.Request], httpx.Response]


@dataclass
class RecordingBackend:
    """MockTransport handler that records requests and answers from routes."""

    routes: dict[tuple[str, str], Handler | httpx.Response] = field(
        default_factory=dict
    )
    requests: list[httpx.Request] = field(default_factory=list)
    offline: bool = False

    def on(self, method: str, path: str, reply: Handler | httpx.Response) -> None:
        self.routes[(method, path)] = reply

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.offline:
            raise httpx.ConnectError("connection refused", request=request)
        reply = self.routes.get((request.method, request.url.path))
        if reply is None:
            return httpx.Response(404, json={"message": "Not Found"})
        if isinstance(reply, httpx.Response):
            return reply
        return reply(request)

    def paths(self) -> list[str]:
        return [f"{request.method} {request.url.path}" for request in self.requests]


@dataclass
class ClientHarness:
    """Resource client wired to a recording backend and in-memory store."""

    backend: RecordingBackend
    store: InMemoryCredentialStore
    guard: SessionGuard
    api: HttpxInventoryApi
    client: ResourceClient

    def sign_in_as(self, token: str = "t1") -> None:
        self.store.save(Session(access_token=token, refresh_token="r1"))


def build_harness(backend: RecordingBackend | None = None) -> ClientHarness:
    resolved_backend = backend or RecordingBackend()
    store = InMemoryCredentialStore()
    guard = SessionGuard(store)
    api = HttpxInventoryApi(
        http_client=httpx.AsyncClient(
            base_url=BASE_URL, transport=httpx.MockTransport(resolved_backend)
        )
    )
    client = ResourceClient(api=api, guard=guard)
    return ClientHarness(
        backend=resolved_backend, store=store, guard=guard, api=api, client=client
    )


def product_json(product_id: str = "p1", **overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "_id": product_id,
        "name": "Lamp",
        "price": 12.5,
        "description": "Desk lamp",
        "imageUrls": ["https://cdn.test/lamp.png"],
        "colors": ["red", "blue"],
        "createdAt": "2024-05-01T10:00:00.000Z",
        "updatedAt": "2024-05-02T10:00:00.000Z",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        api_url=f"{BASE_URL}/",
        credentials_path=str(tmp_path / "credentials.json"),
    )


@pytest.fixture
def harness() -> ClientHarness:
    return build_harness()
