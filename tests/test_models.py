import uuid
from datetime import datetime, timezone

import pytest

from todoserver.models import (
    CreateTodo,
    Todo,
    UpdateTodo,
    ValidationError,
    parse_create,
    parse_update,
)


@pytest.fixture
def todo():
    moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    return Todo(
        id=uuid.UUID(int=1),
        title="Buy milk",
        description="two bottles",
        completed=False,
        created_at=moment,
        updated_at=moment,
    )


def test_parse_create_with_description():
    assert parse_create({"title": "a", "description": "b"}) == CreateTodo("a", "b")


def test_parse_create_without_description():
    assert parse_create({"title": "a"}) == CreateTodo("a", None)


def test_parse_create_ignores_unknown_fields():
    assert parse_create({"title": "a", "extra": 1}).title == "a"


@pytest.mark.parametrize(
    "payload",
    [{}, {"title": 5}, {"title": None}, {"title": "a", "description": 3}, [], "text"],
)
def test_parse_create_rejects_bad_bodies(payload):
    with pytest.raises(ValidationError):
        parse_create(payload)


def test_parse_update_empty_leaves_everything_unset():
    assert parse_update({}) == UpdateTodo(None, None, None)


@pytest.mark.parametrize(
    "payload",
    [{"completed": 1}, {"completed": "yes"}, {"title": 1}, {"description": []}, None],
)
def test_parse_update_rejects_bad_bodies(payload):
    with pytest.raises(ValidationError):
        parse_update(payload)


def test_empty_update_keeps_todo(todo):
    assert UpdateTodo().apply(todo) == todo


def test_update_replaces_given_fields(todo):
    changed = parse_update({"title": "Buy tea", "completed": True}).apply(todo)
    assert changed.title == "Buy tea"
    assert changed.completed is True
    assert changed.description == todo.description
    assert changed.id == todo.id


def test_update_sets_description(todo):
    assert parse_update({"description": "one"}).apply(todo).description == "one"


def test_null_description_is_left_unchanged(todo):
    assert parse_update({"description": None}).apply(todo).description == todo.description


def test_apply_does_not_mutate_original(todo):
    UpdateTodo(title="other").apply(todo)
    assert todo.title == "Buy milk"


def test_to_dict_fields(todo):
    data = todo.to_dict()
    assert set(data) == {"id", "title", "description", "completed", "created_at", "updated_at"}
    assert uuid.UUID(data["id"]) == todo.id
    assert data["title"] == todo.title
    assert data["completed"] is False
    assert data["created_at"] == "2024-01-02T03:04:05Z"


def test_to_dict_keeps_fraction(todo):
    stamped = UpdateTodo().apply(todo)
    stamped = Todo(
        id=stamped.id,
        title=stamped.title,
        description=None,
        completed=True,
        created_at=datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc),
        updated_at=datetime(2024, 1, 2, 3, 4, 5, 120000, tzinfo=timezone.utc),
    )
    data = stamped.to_dict()
    assert data["description"] is None
    assert data["created_at"].endswith(".123456Z")
    assert data["updated_at"].endswith(".120Z")