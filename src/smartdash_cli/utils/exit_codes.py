"""
Exit codes for SmartDash CLI.

Semantic exit codes so scripts can tell what went wrong without parsing output.
"""

from smartdash_cli.models.exceptions import (
    AuthError,
    InvalidCredentialsError,
    NetworkError,
    NotFoundError,
    SessionEndedError,
    ValidationError,
)

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Authentication failure (not logged in, invalid credentials, etc.)
ERROR_AUTH_FAILURE = 3

# Network or API error (server unreachable, timeout, etc.)
ERROR_NETWORK = 4

# Resource not found
ERROR_NOT_FOUND = 5


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_AUTH_FAILURE: "ERROR_AUTH_FAILURE",
        ERROR_NETWORK: "ERROR_NETWORK",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_AUTH_FAILURE: "Authentication failure - please login",
        ERROR_NETWORK: "Network or API error - check connection",
        ERROR_NOT_FOUND: "Resource not found",
    }
    return descriptions.get(code, "Unknown error")


def exit_code_for(error: BaseException) -> int:
    """Map an exception onto the exit code a command should end with."""
    if isinstance(error, (AuthError, InvalidCredentialsError, SessionEndedError)):
        return ERROR_AUTH_FAILURE
    if isinstance(error, ValidationError):
        return ERROR_INVALID_ARGS
    if isinstance(error, NetworkError):
        return ERROR_NETWORK
    if isinstance(error, NotFoundError):
        return ERROR_NOT_FOUND
    return ERROR_GENERAL
