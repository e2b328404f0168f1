"""Task data models."""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Task(BaseModel):
    """Task model, as returned by the SmartDash backend.

    The backend is document-store shaped and names the identifier ``_id``;
    plain ``id`` is accepted too. Fields the model does not know about are
    kept so they can be sent back unchanged on update.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str = Field(
        validation_alias=AliasChoices("_id", "id"),
        serialization_alias="_id",
    )
    title: str = Field(min_length=1)
    completed: bool = False
    created_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("createdAt", "created_at"),
        serialization_alias="createdAt",
    )

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Accept numeric identifiers from backends that use them."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def update_payload(self, **changes: Any) -> dict[str, Any]:
        """Body for ``PUT /tasks/{id}``: every field of the task plus *changes*."""
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        payload.pop("_id", None)
        payload.update(changes)
        return payload


class TaskCreate(BaseModel):
    """Body for ``POST /tasks``."""

    title: str = Field(min_length=1)
    completed: bool = False
