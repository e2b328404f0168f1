"""Application context: wires storage, session, API client and services together.

Usage Pattern:
    from smartdash_cli.services.context_manager import get_app_context

    ctx = get_app_context()
    async with ctx.client:
        await ctx.tasks.load()
        await ctx.tasks.add("Buy milk")

One context exists per process. Tests build their own with
``build_app_context`` and an in-process transport instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import httpx

from smartdash_cli.repositories.task_repository import TaskRepository
from smartdash_cli.services.api.auth import AuthAPI
from smartdash_cli.services.api.client import APIClient
from smartdash_cli.services.api.tasks import TasksAPI
from smartdash_cli.services.auth_service import AuthService
from smartdash_cli.services.config_service import ConfigService, get_config_service
from smartdash_cli.services.local_storage import LocalStorage
from smartdash_cli.services.preferences_service import PreferencesService
from smartdash_cli.services.session_store import SessionStore


@dataclass
class AppContext:
    """Everything a command needs, built once."""

    config_service: ConfigService
    storage: LocalStorage
    session: SessionStore
    preferences: PreferencesService
    client: APIClient
    tasks: TaskRepository
    auth: AuthService


def build_app_context(
    config_service: ConfigService,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AppContext:
    """Assemble an AppContext from *config_service*."""
    storage = LocalStorage(config_service.local_storage_path)
    session = SessionStore(storage)
    client = APIClient(
        session,
        config_service.get_api_endpoint(),
        timeout=config_service.config.api.timeout,
        transport=transport,
    )
    tasks = TaskRepository(TasksAPI(client))
    return AppContext(
        config_service=config_service,
        storage=storage,
        session=session,
        preferences=PreferencesService(storage),
        client=client,
        tasks=tasks,
        auth=AuthService(session, AuthAPI(client), tasks),
    )


@lru_cache(maxsize=1)
def get_app_context() -> AppContext:
    """Get the cached AppContext for this process."""
    return build_app_context(get_config_service())
