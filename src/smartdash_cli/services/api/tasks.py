"""Tasks API endpoints."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError as PydanticValidationError

from smartdash_cli.models.exceptions import ServerError
from smartdash_cli.models.task import Task, TaskCreate
from smartdash_cli.services.api.client import APIClient


def _json_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise ServerError(
            "Server returned a non-JSON body", status_code=response.status_code
        ) from e


def parse_task(data: Any) -> Task:
    """Validate a canonical task object; anything else is a ServerError."""
    try:
        return Task.model_validate(data)
    except PydanticValidationError as e:
        raise ServerError(f"Unexpected task payload from server: {e.errors()[0]['msg']}") from e


class TasksAPI:
    """Tasks API client."""

    def __init__(self, client: APIClient):
        self.client = client

    async def list_tasks(self) -> list[Task]:
        """List every task of the current user."""
        response = await self.client.get("/tasks")
        data = _json_body(response)
        if not isinstance(data, list):
            raise ServerError("Expected a list of tasks from GET /tasks")
        return [parse_task(item) for item in data]

    async def create_task(self, title: str) -> Task:
        """Create a new, not yet completed task."""
        body = TaskCreate(title=title).model_dump()
        response = await self.client.post("/tasks", json=body)
        return parse_task(_json_body(response))

    async def update_task(self, task_id: str, fields: dict[str, Any]) -> Task:
        """Update a task with full or partial fields."""
        response = await self.client.put(f"/tasks/{quote(task_id, safe='')}", json=fields)
        return parse_task(_json_body(response))

    async def delete_task(self, task_id: str) -> None:
        """Delete a task."""
        await self.client.delete(f"/tasks/{quote(task_id, safe='')}")
