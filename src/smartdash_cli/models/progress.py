"""Progress statistics derived from a task collection."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from smartdash_cli.models.task import Task


class TaskProgress(BaseModel):
    """Read-only completion summary of a task collection."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    completed_count: int = 0

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> TaskProgress:
        """Summarise *tasks*."""
        total = 0
        completed = 0
        for task in tasks:
            total += 1
            if task.completed:
                completed += 1
        return cls(total=total, completed_count=completed)

    @property
    def remaining_count(self) -> int:
        return self.total - self.completed_count

    @property
    def percent_complete(self) -> float:
        """Percentage of completed tasks; 0 for an empty collection."""
        if self.total == 0:
            return 0.0
        return self.completed_count / self.total * 100

    @property
    def headline(self) -> str | None:
        """Encouragement shown under the progress ring, None when there are no tasks."""
        if self.total == 0:
            return None
        percent = self.percent_complete
        if percent == 100:
            return "All tasks completed!"
        if percent >= 75:
            return "Almost there!"
        if percent >= 50:
            return "Great progress!"
        return "Keep going!"

    @property
    def detail(self) -> str | None:
        if self.total == 0:
            return None
        if self.percent_complete == 100:
            return "Excellent work today"
        return f"{self.remaining_count} tasks remaining"
