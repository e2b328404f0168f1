"""Authentication API endpoints."""

from typing import Any

from smartdash_cli.models.exceptions import ServerError
from smartdash_cli.services.api.client import APIClient


class AuthAPI:
    """Authentication API client."""

    def __init__(self, client: APIClient):
        self.client = client

    async def login(self, email: str, password: str) -> dict[str, Any]:
        """Login with email and password. Returns the body, ``{"token": ...}``."""
        response = await self.client.post(
            "/auth/login",
            json={"email": email, "password": password},
        )
        try:
            data = response.json()
        except ValueError as e:
            raise ServerError("Login response was not JSON") from e
        if not isinstance(data, dict):
            raise ServerError("Login response was not a JSON object")
        return data

    async def signup(
        self,
        name: str,
        email: str,
        password: str,
        note: str | None = None,
    ) -> None:
        """Register a new account. Does not log in."""
        body = {"name": name, "email": email, "password": password}
        if note:
            body["note"] = note
        await self.client.post("/auth/signup", json=body)
