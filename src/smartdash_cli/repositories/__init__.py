"""Repositories for the SmartDash CLI.

The task repository owns the in-memory task collection and keeps it in sync
with the backend through :mod:`smartdash_cli.services.api.tasks`.
"""

from .task_repository import LoadState, TaskRepository

__all__ = ["TaskRepository", "LoadState"]
