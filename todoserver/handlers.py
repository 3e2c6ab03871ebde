"""Operations behind the todo API endpoints."""

from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from http import HTTPStatus
from typing import Any, Callable, Iterator, TypeVar

from todoserver.db import DatabaseError, TodoStore
from todoserver.models import Todo, ValidationError, parse_create, parse_update

_log = logging.getLogger("todoserver.handlers")

_T = TypeVar("_T")


class ApiError(Exception):
    """An error that maps onto an HTTP status and a plain-text message."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = HTTPStatus(status)
        self.message = message


@contextmanager
def _database_failure(action: str) -> Iterator[None]:
    try:
        yield
    except DatabaseError as exc:
        _log.error("Failed to %s: %r", action, exc)
        raise ApiError(
            HTTPStatus.INTERNAL_SERVER_ERROR, f"Failed to {action}: {exc}"
        ) from exc


def _not_found(todo_id: uuid.UUID) -> ApiError:
    return ApiError(HTTPStatus.NOT_FOUND, f"Todo with id {todo_id} not found")


def _parse(parser: Callable[[Any], _T], payload: Any) -> _T:
    try:
        return parser(payload)
    except ValidationError as exc:
        raise ApiError(
            HTTPStatus.UNPROCESSABLE_ENTITY,
            f"Failed to deserialize the JSON body into the target type: {exc}",
        ) from exc


def create_todo(store: TodoStore, payload: Any) -> Todo:
    """Create a todo from a decoded JSON body and return it."""
    request = _parse(parse_create, payload)
    with _database_failure("create todo"):
        return store.insert(request.title, request.description)


def get_todos(store: TodoStore) -> list[Todo]:
    """Return every todo, newest first."""
    with _database_failure("fetch todos"):
        return store.list_all()


def get_todo(store: TodoStore, todo_id: uuid.UUID) -> Todo:
    """Return one todo; 404 if there is none with this id."""
    with _database_failure("fetch todo"):
        todo = store.fetch(todo_id)
    if todo is None:
        raise _not_found(todo_id)
    return todo


def update_todo(store: TodoStore, todo_id: uuid.UUID, payload: Any) -> Todo:
    """Apply the fields given in a decoded JSON body to a stored todo."""
    changes = _parse(parse_update, payload)
    with _database_failure("fetch todo"):
        todo = store.fetch(todo_id)
    if todo is None:
        raise _not_found(todo_id)
    todo = changes.apply(todo)
    with _database_failure("update todo"):
        updated = store.update(todo_id, todo.title, todo.description, todo.completed)
    if updated is None:
        _log.error("Failed to update todo: row %s vanished", todo_id)
        raise ApiError(
            HTTPStatus.INTERNAL_SERVER_ERROR,
            "Failed to update todo: no rows returned by a query that "
            "expected to return at least one row",
        )
    return updated


def delete_todo(store: TodoStore, todo_id: uuid.UUID) -> None:
    """Delete a todo; 404 if there is none with this id."""
    with _database_failure("delete todo"):
        deleted = store.delete(todo_id)
    if not deleted:
        raise _not_found(todo_id)