"""Shared test fixtures and configuration.

Provides an in-process fake of the SmartDash backend (served through
``httpx.MockTransport``) and fully wired application contexts whose files
live under *tmp_path* only.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable
from logging.handlers import RotatingFileHandler
from unittest.mock import patch

import httpx
import pytest
import pytest_asyncio

from smartdash_cli.repositories.task_repository import TaskRepository
from smartdash_cli.services.api.client import APIClient
from smartdash_cli.services.api.tasks import TasksAPI
from smartdash_cli.services.local_storage import LocalStorage
from smartdash_cli.services.session_store import SessionStore

BASE_URL = "http://testserver/api"
VALID_TOKEN = "token-abc"
CREATED_AT = "2026-10-19T09:00:00.000Z"

# Modules that import get_app_context by name
_APP_CONTEXT_USERS = [
    "smartdash_cli.commands.decorators",
    "smartdash_cli.commands.auth",
    "smartdash_cli.commands.tasks",
    "smartdash_cli.commands.stats",
    "smartdash_cli.commands.calendar_command",
    "smartdash_cli.commands.config",
    "smartdash_cli.commands.dashboard",
    "smartdash_cli.main",
]


# ---------------------------------------------------------------------------
# Fake backend
# ---------------------------------------------------------------------------


class FakeBackend:
    """Minimal in-memory SmartDash backend.

    Routes mirror the real service: ``/api/tasks`` CRUD and ``/api/auth``.
    ``fail_next`` injects one failure (a response or a raised transport
    error) for a method/path; ``hold`` parks responses for a method until
    released, to interleave concurrent operations deterministically.
    """

    def __init__(self):
        self.tasks: dict[str, dict] = {}
        self.users: dict[str, dict] = {"user@example.com": {"password": "secret1", "name": "User"}}
        self.requests: list[httpx.Request] = []
        self.require_auth = True
        self.login_body: dict | None = None
        self._next_id = 1
        self._failures: dict[tuple[str, str], httpx.Response | Exception] = {}
        self._holds: dict[str, tuple[asyncio.Event, asyncio.Event]] = {}

    # -- helpers for tests -------------------------------------------------

    def seed(self, title: str, completed: bool = False) -> dict:
        task_id = str(self._next_id)
        self._next_id += 1
        task = {
            "_id": task_id,
            "title": title,
            "completed": completed,
            "createdAt": CREATED_AT,
            "__v": 0,
        }
        self.tasks[task_id] = task
        return task

    def fail_next(self, method: str, path: str, failure: httpx.Response | Exception) -> None:
        self._failures[(method, path)] = failure

    def hold(self, method: str) -> tuple[asyncio.Event, asyncio.Event]:
        """Park the next responses to *method*; returns (entered, release)."""
        events = (asyncio.Event(), asyncio.Event())
        self._holds[method] = events
        return events

    def requests_for(self, method: str, path: str | None = None) -> list[httpx.Request]:
        return [
            r
            for r in self.requests
            if r.method == method and (path is None or r.url.path == f"/api{path}")
        ]

    @staticmethod
    def body(request: httpx.Request):
        return json.loads(request.content) if request.content else None

    # -- transport ---------------------------------------------------------

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")

        failure = self._failures.pop((request.method, path), None)
        if isinstance(failure, Exception):
            raise failure
        response = failure if failure is not None else self._route(request, path)

        held = self._holds.get(request.method)
        if held is not None:
            entered, release = held
            entered.set()
            await release.wait()
        return response

    def _route(self, request: httpx.Request, path: str) -> httpx.Response:
        if path.startswith("/auth/"):
            return self._auth(request, path)

        if self.require_auth and request.headers.get("Authorization") != f"Bearer {VALID_TOKEN}":
            return httpx.Response(401, json={"message": "Token is not valid"})

        if path == "/tasks":
            if request.method == "GET":
                return httpx.Response(200, json=list(self.tasks.values()))
            if request.method == "POST":
                body = self.body(request)
                if not body.get("title"):
                    return httpx.Response(400, json={"message": "Title is required"})
                task = self.seed(body["title"], body.get("completed", False))
                return httpx.Response(201, json=task)

        if path.startswith("/tasks/"):
            task_id = path.removeprefix("/tasks/")
            task = self.tasks.get(task_id)
            if task is None:
                return httpx.Response(404, json={"message": "Task not found"})
            if request.method == "PUT":
                task.update(self.body(request))
                task["_id"] = task_id
                return httpx.Response(200, json=task)
            if request.method == "DELETE":
                del self.tasks[task_id]
                return httpx.Response(200, json={"message": "Task deleted"})

        return httpx.Response(404, json={"message": "Not found"})

    def _auth(self, request: httpx.Request, path: str) -> httpx.Response:
        body = self.body(request) or {}
        if path == "/auth/login":
            user = self.users.get(body.get("email"))
            if user is None or user["password"] != body.get("password"):
                return httpx.Response(400, json={"message": "Invalid credentials"})
            return httpx.Response(200, json=self.login_body or {"token": VALID_TOKEN})
        if path == "/auth/signup":
            if body.get("email") in self.users:
                return httpx.Response(409, json={"message": "User already exists"})
            if len(body.get("password", "")) < 6:
                return httpx.Response(400, json={"message": "Password must be at least 6 characters"})
            self.users[body["email"]] = {
                "password": body["password"],
                "name": body["name"],
                "note": body.get("note"),
            }
            return httpx.Response(201, json={"message": "User registered"})
        return httpx.Response(404, json={"message": "Not found"})


# ---------------------------------------------------------------------------
# Core fixtures
# ---------------------------------------------------------------------------


def _drop_file_handlers() -> None:
    logger = logging.getLogger("smartdash_cli")
    for handler in list(logger.handlers):
        if isinstance(handler, RotatingFileHandler):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def isolate_logger(tmp_path):
    """Keep the application log file out of the real user log dir."""
    import smartdash_cli.utils.logger as logger_mod

    logger_mod._logger = None
    _drop_file_handlers()
    with patch("smartdash_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    logger_mod._logger = None
    _drop_file_handlers()


@pytest.fixture(autouse=True)
def reset_theme():
    from smartdash_cli.utils.ui.console import set_dark_mode

    set_dark_mode(False)
    yield
    set_dark_mode(False)


@pytest.fixture()
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture()
def storage(tmp_path) -> LocalStorage:
    return LocalStorage(tmp_path / "local_storage.json")


@pytest.fixture()
def session(storage) -> SessionStore:
    return SessionStore(storage)


@pytest.fixture()
def logged_in(session) -> SessionStore:
    session.set_token(VALID_TOKEN)
    return session


@pytest_asyncio.fixture()
async def client(session, backend):
    api_client = APIClient(session, BASE_URL, transport=httpx.MockTransport(backend.handle))
    yield api_client
    await api_client.close()


@pytest.fixture()
def make_client(session) -> Callable[[Callable], APIClient]:
    """Build an APIClient served by an ad-hoc handler."""

    def factory(handler: Callable) -> APIClient:
        return APIClient(session, BASE_URL, transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture()
def repo(client, logged_in) -> TaskRepository:
    return TaskRepository(TasksAPI(client))


# ---------------------------------------------------------------------------
# Config and app context isolation
# ---------------------------------------------------------------------------


@pytest.fixture()
def tmp_config(tmp_path, monkeypatch):
    """Provide a real ConfigService backed by a temporary directory.

    Patches platform dirs so config/data files land in *tmp_path* only and
    clears the environment overrides.
    """
    from smartdash_cli.services.config_service import ConfigService, get_config_service

    monkeypatch.delenv("SMARTDASH_ENV", raising=False)
    monkeypatch.delenv("SMARTDASH_API_URL", raising=False)
    get_config_service.cache_clear()
    with patch(
        "smartdash_cli.services.config_service.user_config_dir",
        return_value=str(tmp_path / "config"),
    ):
        with patch(
            "smartdash_cli.services.config_service.user_data_dir",
            return_value=str(tmp_path / "data"),
        ):
            yield ConfigService()
    get_config_service.cache_clear()


@pytest.fixture()
def app_context(tmp_config, backend, monkeypatch):
    """A wired AppContext talking to the fake backend, patched into every command module."""
    from contextlib import ExitStack

    from smartdash_cli.services.context_manager import build_app_context

    monkeypatch.setenv("SMARTDASH_API_URL", BASE_URL)
    ctx = build_app_context(tmp_config, transport=httpx.MockTransport(backend.handle))

    with ExitStack() as stack:
        for module in _APP_CONTEXT_USERS:
            stack.enter_context(patch(f"{module}.get_app_context", return_value=ctx))
        yield ctx


@pytest.fixture()
def logged_in_context(app_context):
    app_context.session.set_token(VALID_TOKEN)
    return app_context
