"""Todo records and the request bodies that create and change them."""

from __future__ import annotations

import dataclasses
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional


class ValidationError(ValueError):
    """Raised when a request body does not have the expected shape."""


def _timestamp(moment: datetime) -> str:
    moment = moment.astimezone(timezone.utc)
    micro = moment.microsecond
    fraction = "" if not micro else f".{micro // 1000:03d}" if not micro % 1000 else f".{micro:06d}"
    return f"{moment:%Y-%m-%dT%H:%M:%S}{fraction}Z"


@dataclass(frozen=True)
class Todo:
    """A stored todo item."""

    id: uuid.UUID
    title: str
    description: Optional[str]
    completed: bool
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation."""
        return {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "created_at": _timestamp(self.created_at),
            "updated_at": _timestamp(self.updated_at),
        }


@dataclass(frozen=True)
class CreateTodo:
    """Body of a create request."""

    title: str
    description: Optional[str] = None


@dataclass(frozen=True)
class UpdateTodo:
    """Body of an update request; None leaves a field as it is."""

    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None

    def apply(self, todo: Todo) -> Todo:
        """Return a copy of todo with the given fields replaced."""
        changes = {k: v for k, v in dataclasses.asdict(self).items() if v is not None}
        return dataclasses.replace(todo, **changes)


def _field(body: Any, key: str, kind: type, kind_name: str) -> Any:
    if not isinstance(body, dict):
        raise ValidationError("request body must be a JSON object")
    value = body.get(key)
    if value is not None and not isinstance(value, kind):
        raise ValidationError(f"field '{key}' must be a {kind_name}")
    return value


def parse_create(payload: Any) -> CreateTodo:
    """Validate a decoded JSON body for creating a todo."""
    title = _field(payload, "title", str, "string")
    if title is None:
        if "title" not in payload:
            raise ValidationError("missing field 'title'")
        raise ValidationError("field 'title' must be a string")
    return CreateTodo(title, _field(payload, "description", str, "string"))


def parse_update(payload: Any) -> UpdateTodo:
    """Validate a decoded JSON body for updating a todo."""
    return UpdateTodo(
        _field(payload, "title", str, "string"),
        _field(payload, "description", str, "string"),
        _field(payload, "completed", bool, "boolean"),
    )