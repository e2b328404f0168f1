"""Session store: the current authentication token."""

from __future__ import annotations

import logging

from smartdash_cli.services.local_storage import LocalStorage

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"


class SessionStore:
    """Single source of truth for whether the user is logged in, and with what token.

    The token lives in :class:`LocalStorage`, so a session restored after a
    restart is simply the token found there. Nothing is cached here; every
    ``get_token`` reads storage, which is what lets the API client pick up a
    rotated token (or a logout) on its very next request.
    """

    def __init__(self, storage: LocalStorage, key: str = TOKEN_KEY):
        self._storage = storage
        self._key = key

    def set_token(self, token: str) -> None:
        """Persist *token* and mark the session active."""
        if not token:
            raise ValueError("token must be a non-empty string")
        self._storage.set_item(self._key, token)
        logger.debug("Session token stored")

    def get_token(self) -> str | None:
        """Return the token, or None when logged out."""
        try:
            token = self._storage.get_item(self._key)
        except Exception:
            logger.exception("Failed to read session token")
            return None
        return token or None

    def clear(self) -> None:
        """Drop the token and mark the session inactive."""
        self._storage.remove_item(self._key)
        logger.debug("Session token cleared")

    @property
    def is_active(self) -> bool:
        return self.get_token() is not None
