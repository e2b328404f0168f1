"""API client for the SmartDash backend."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from smartdash_cli.models.exceptions import (
    AuthError,
    ConflictError,
    NetworkError,
    ServerError,
)
from smartdash_cli.services.session_store import SessionStore

logger = logging.getLogger(__name__)


def _extract_message(response: httpx.Response) -> str | None:
    """Pull a human-readable message out of an error response body."""
    try:
        data = response.json()
    except ValueError:
        text = response.text.strip()
        return text[:200] or None
    if isinstance(data, dict):
        for key in ("message", "error", "detail"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
    return None


def error_for_response(response: httpx.Response) -> Exception:
    """Map a non-2xx response onto the SmartDash error taxonomy."""
    status = response.status_code
    message = _extract_message(response)

    if status in (401, 403):
        return AuthError(message or "Not authorized", status_code=status)
    if status >= 500:
        return NetworkError(f"Server error {status}" + (f": {message}" if message else ""))
    if status == 409:
        return ConflictError(message or "Resource already exists", status_code=status)
    return ServerError(message or f"Request failed with status {status}", status_code=status)


class APIClient:
    """HTTP client for the SmartDash API.

    Every request goes through :meth:`request`, which attaches the session
    token read from the :class:`SessionStore` right before dispatch and turns
    failures into :class:`NetworkError`, :class:`AuthError` or
    :class:`ServerError`. There is no retry here; callers decide.
    """

    def __init__(
        self,
        session: SessionStore,
        base_url: str,
        *,
        timeout: float = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> APIClient:
        """Enter the async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit the async context manager and ensure the client is closed."""
        await self.close()

    def _get_headers(self) -> dict[str, str]:
        """Get HTTP headers with authentication."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        token = self.session.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Make an HTTP request to the API."""
        client = await self._get_client()
        url = path if path.startswith("/") else f"/{path}"

        try:
            response = await client.request(
                method=method,
                url=url,
                json=json,
                params=params,
                headers=self._get_headers(),
            )
        except httpx.TimeoutException as e:
            logger.warning("%s %s timed out after %ss", method, url, self.timeout)
            raise NetworkError(f"{method} {url} timed out") from e
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise NetworkError(f"Could not reach {self.base_url}: {e}") from e

        logger.debug("%s %s -> %s", method, url, response.status_code)
        if response.is_success:
            return response
        raise error_for_response(response)

    async def get(
        self, path: str, *, params: dict[str, Any] | None = None
    ) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", path, params=params)

    async def post(self, path: str, *, json: Any = None) -> httpx.Response:
        """Make a POST request."""
        return await self.request("POST", path, json=json)

    async def put(self, path: str, *, json: Any = None) -> httpx.Response:
        """Make a PUT request."""
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> httpx.Response:
        """Make a DELETE request."""
        return await self.request("DELETE", path)
