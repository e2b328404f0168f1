"""Service for handling authentication-related operations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from smartdash_cli.models.exceptions import (
    AuthError,
    ConflictError,
    InvalidCredentialsError,
    ServerError,
    ValidationError,
)
from smartdash_cli.services.api.auth import AuthAPI
from smartdash_cli.services.session_store import SessionStore

if TYPE_CHECKING:
    from smartdash_cli.repositories.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Login, signup and logout.

    Login turns credentials into a session token stored in the
    :class:`SessionStore`. Logout drops the token and the task collection
    without talking to the server.
    """

    def __init__(self, session: SessionStore, auth_api: AuthAPI, tasks: TaskRepository):
        self.session = session
        self.auth_api = auth_api
        self.tasks = tasks

    @property
    def is_authenticated(self) -> bool:
        """Check if the user is authenticated."""
        return self.session.is_active

    async def login(self, email: str, password: str) -> None:
        """Exchange credentials for a session token.

        Raises:
            ValidationError: email or password is empty
            InvalidCredentialsError: the server rejected the credentials
            NetworkError: the server could not be reached
            ServerError: the server answered without a token
        """
        email = (email or "").strip()
        if not email or not password:
            raise ValidationError("Email and password are required")

        try:
            data = await self.auth_api.login(email, password)
        except (AuthError, ServerError) as e:
            if isinstance(e, ServerError) and e.status_code is None:
                raise
            logger.info("Login rejected for %s", email)
            raise InvalidCredentialsError(e.message or "Login failed") from e

        token = data.get("token")
        if not isinstance(token, str) or not token:
            raise ServerError("Invalid response from server: no token received")

        self.session.set_token(token)
        # A new session never sees the previous one's tasks.
        self.tasks.reset()
        logger.info("Logged in as %s", email)

    async def signup(
        self,
        name: str,
        email: str,
        password: str,
        note: str | None = None,
    ) -> None:
        """Register an account. The caller is expected to log in afterwards.

        Raises:
            ValidationError: missing fields, malformed email, or rejected by the server
            ConflictError: the email is already registered
            NetworkError: the server could not be reached
        """
        name = (name or "").strip()
        email = (email or "").strip()
        if not name or not email or not password:
            raise ValidationError("Name, email and password are required")
        if "@" not in email:
            raise ValidationError(f"'{email}' is not a valid email address")

        try:
            await self.auth_api.signup(name, email, password, note=note or None)
        except ConflictError:
            raise
        except (AuthError, ServerError) as e:
            # Signup never touches the session, so a 401/403 is a rejected form.
            raise ValidationError(e.message) from e
        logger.info("Registered %s", email)

    def logout(self) -> None:
        """Clear the session and the local task collection."""
        self.session.clear()
        self.tasks.reset()
        logger.info("Logged out")
