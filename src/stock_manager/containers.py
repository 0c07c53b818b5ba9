"""Dependency container wiring for the client."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from stock_manager.adapters.credential_store import CredentialStore, FileCredentialStore
from stock_manager.adapters.inventory_api import HttpxInventoryApi, InventoryApi
from stock_manager.config import Settings
from stock_manager.services.heartbeat import BackendHeartbeat
from stock_manager.services.resource_client import ResourceClient
from stock_manager.services.session_guard import SessionGuard


@dataclass
class AppContainer:
    """Holds client-wide dependencies."""

    settings: Settings
    credential_store: CredentialStore
    session_guard: SessionGuard
    inventory_api: InventoryApi
    resource_client: ResourceClient
    heartbeat: BackendHeartbeat
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None,
    credential_store: CredentialStore | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = credential_store or FileCredentialStore(
        resolved_settings.resolved_credentials_path()
    )
    session_guard = SessionGuard(store)
    inventory_api = HttpxInventoryApi.create(
        base_url=resolved_settings.resolved_api_url(),
        timeout=resolved_settings.request_timeout_seconds,
    )
    resource_client = ResourceClient(
        api=inventory_api,
        guard=session_guard,
        min_password_length=resolved_settings.min_password_length,
    )
    heartbeat = BackendHeartbeat(
        api=inventory_api,
        interval_seconds=resolved_settings.heartbeat_interval_seconds,
    )

    async def close_resources() -> None:
        await heartbeat.stop()
        await inventory_api.close()

    return AppContainer(
        settings=resolved_settings,
        credential_store=store,
        session_guard=session_guard,
        inventory_api=inventory_api,
        resource_client=resource_client,
        heartbeat=heartbeat,
        close_resources=close_resources,
    )
