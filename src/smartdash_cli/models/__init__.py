"""SmartDash CLI domain models.

Pydantic models for the entities the dashboard works with, plus the error
taxonomy shared by the API client, the task repository and the auth flow.
"""

from .exceptions import (
    AuthError,
    ConflictError,
    InvalidCredentialsError,
    NetworkError,
    NotFoundError,
    ServerError,
    SessionEndedError,
    SmartDashError,
    ValidationError,
)
from .progress import TaskProgress
from .task import Task, TaskCreate

__all__ = [
    "Task",
    "TaskCreate",
    "TaskProgress",
    "SmartDashError",
    "NetworkError",
    "AuthError",
    "ServerError",
    "ConflictError",
    "ValidationError",
    "NotFoundError",
    "InvalidCredentialsError",
    "SessionEndedError",
]
