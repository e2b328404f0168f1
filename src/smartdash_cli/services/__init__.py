"""Services module for SmartDash CLI - Business logic layer."""

from .auth_service import AuthService
from .config_service import ConfigService
from .local_storage import LocalStorage
from .preferences_service import PreferencesService
from .session_store import SessionStore

__all__ = [
    "AuthService",
    "ConfigService",
    "LocalStorage",
    "PreferencesService",
    "SessionStore",
]
