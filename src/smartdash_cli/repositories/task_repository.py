"""Task repository: the in-memory task collection, kept in sync with the backend.

Every operation performs the remote call first and only then reconciles the
local collection, using the object the server sent back. Nothing is inserted,
replaced or removed speculatively, so what the dashboard shows is always
server state.

Operations are not serialized. Several may be in flight on the same event
loop; each completion applies its own change, by task id, to the collection
as it is at that moment. ``reset()`` (called on logout) bumps a generation
counter, and any completion belonging to an older generation is discarded.
"""

from __future__ import annotations

import logging
from enum import Enum

from smartdash_cli.models.exceptions import (
    NotFoundError,
    ServerError,
    SessionEndedError,
    ValidationError,
)
from smartdash_cli.models.progress import TaskProgress
from smartdash_cli.models.task import Task
from smartdash_cli.services.api.tasks import TasksAPI

logger = logging.getLogger(__name__)


class LoadState(str, Enum):
    """Lifecycle of the collection."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


class TaskRepository:
    """CRUD facade over the remote task store with local reconciliation."""

    def __init__(self, tasks_api: TasksAPI):
        self._api = tasks_api
        self._tasks: list[Task] = []
        self._loaded = False
        self._pending_loads = 0
        self._generation = 0

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of the collection, in server order."""
        return tuple(self._tasks)

    @property
    def state(self) -> LoadState:
        if self._pending_loads:
            return LoadState.LOADING
        if self._loaded:
            return LoadState.READY
        return LoadState.UNINITIALIZED

    @property
    def progress(self) -> TaskProgress:
        return TaskProgress.from_tasks(self._tasks)

    @property
    def completed_count(self) -> int:
        return self.progress.completed_count

    @property
    def percent_complete(self) -> float:
        return self.progress.percent_complete

    def get(self, task_id: str) -> Task:
        """Return the local task with *task_id*.

        Raises:
            NotFoundError: no such task in the local collection
        """
        index = self._index_of(task_id)
        if index is None:
            raise NotFoundError(f"Task '{task_id}' not found")
        return self._tasks[index]

    def _index_of(self, task_id: str) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    def _check_current(self, generation: int, operation: str) -> None:
        """Raise SessionEndedError if reset() ran while *operation* was in flight."""
        if generation != self._generation:
            logger.info("Discarding %s response: session ended while it was in flight", operation)
            raise SessionEndedError(
                f"Session ended before {operation} completed; result discarded"
            )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def load(self) -> list[Task]:
        """Fetch the whole collection and replace local state with it.

        On failure local state is left as it was (stale or empty, never
        corrupt) and the error propagates.
        """
        generation = self._generation
        self._pending_loads += 1
        try:
            tasks = await self._api.list_tasks()
        finally:
            if generation == self._generation:
                self._pending_loads -= 1

        self._check_current(generation, "load")
        self._tasks = list(tasks)
        self._loaded = True
        logger.debug("Loaded %d tasks", len(self._tasks))
        return list(self._tasks)

    async def add(self, title: str) -> Task:
        """Create a task and append the server's copy of it.

        Raises:
            ValidationError: *title* is empty or whitespace; no call is made
        """
        if not title or not title.strip():
            raise ValidationError("Task title cannot be empty")

        generation = self._generation
        task = await self._api.create_task(title.strip())
        self._check_current(generation, "add")

        index = self._index_of(task.id)
        if index is None:
            self._tasks.append(task)
        else:
            # A load that finished while the create was in flight already has it.
            self._tasks[index] = task
        logger.debug("Added task %s", task.id)
        return task

    async def remove(self, task_id: str) -> None:
        """Delete a task remotely, then drop it locally.

        A task that is already gone from the local collection is not an error.
        """
        generation = self._generation
        await self._api.delete_task(task_id)
        self._check_current(generation, "remove")

        index = self._index_of(task_id)
        if index is None:
            logger.debug("Task %s already absent locally", task_id)
            return
        del self._tasks[index]
        logger.debug("Removed task %s", task_id)

    async def toggle(self, task_id: str) -> Task:
        """Flip ``completed`` on a task and store the server's version.

        Raises:
            NotFoundError: *task_id* is not in the local collection; no call is made
        """
        current = self.get(task_id)

        generation = self._generation
        updated = await self._api.update_task(
            task_id, current.update_payload(completed=not current.completed)
        )
        self._check_current(generation, "toggle")
        if updated.id != task_id:
            raise ServerError(
                f"Server answered the update of task '{task_id}' with task '{updated.id}'"
            )

        index = self._index_of(task_id)
        if index is None:
            # Deleted while the update was in flight.
            logger.debug("Task %s deleted before toggle completed", task_id)
            return updated
        self._tasks[index] = updated
        return updated

    def reset(self) -> None:
        """Empty the collection and orphan every operation in flight."""
        self._generation += 1
        self._tasks = []
        self._loaded = False
        self._pending_loads = 0
