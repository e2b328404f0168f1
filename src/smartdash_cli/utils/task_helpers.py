"""Task helper utilities."""

from collections.abc import Sequence

from smartdash_cli.models.exceptions import ValidationError
from smartdash_cli.models.task import Task


def resolve_task_ref(tasks: Sequence[Task], ref: str) -> str:
    """
    Resolve what the user typed into a task ID.

    Accepted, in order:
    1. A full task ID
    2. A 1-based row number as printed by ``tasks list``
    3. A suffix of exactly one task ID

    Anything else is returned unchanged so the caller can report it.

    Raises:
        ValidationError: If the suffix matches more than one task
    """
    ref = ref.strip()
    ids = [t.id for t in tasks]
    if ref in ids:
        return ref

    if ref.isdigit() and 1 <= int(ref) <= len(tasks):
        return tasks[int(ref) - 1].id

    matches = [tid for tid in ids if tid.endswith(ref)] if ref else []
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        raise ValidationError(
            f"'{ref}' matches {len(matches)} tasks; use more characters of the ID"
        )
    return ref
