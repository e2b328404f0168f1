"""Custom exceptions for SmartDash."""


class SmartDashError(Exception):
    """Base exception for all SmartDash errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkError(SmartDashError):
    """Raised when the server cannot be reached, times out or fails with a 5xx."""


class AuthError(SmartDashError):
    """Raised on 401/403: the session token is missing, expired or invalid."""

    def __init__(self, message: str, status_code: int = 401):
        super().__init__(message)
        self.status_code = status_code


class ServerError(SmartDashError):
    """Raised on other non-2xx responses, or when a response body is malformed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ConflictError(ServerError):
    """Raised when the resource already exists (e.g. email already registered)."""


class ValidationError(SmartDashError):
    """Raised when input is rejected before or by the server."""


class NotFoundError(SmartDashError):
    """Raised when a task id is not present in the local collection."""


class InvalidCredentialsError(SmartDashError):
    """Raised when the server rejects an email/password pair."""


class SessionEndedError(SmartDashError):
    """Raised when a response arrives after the session that issued it ended."""
