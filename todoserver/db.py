"""Storage of todos in an SQLite database."""

from __future__ import annotations

import sqlite3
import threading
import uuid
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlparse

from todoserver.models import Todo

_COLUMNS = "id, title, description, completed, created_at, updated_at"


class DatabaseError(Exception):
    """Raised when the database cannot be reached or a query fails."""


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


def _to_todo(row: Optional[tuple]) -> Optional[Todo]:
    if row is None:
        return None
    todo_id, title, description, completed, created, updated = row
    return Todo(
        uuid.UUID(todo_id), title, description, bool(completed),
        datetime.fromisoformat(created), datetime.fromisoformat(updated),
    )


class TodoStore:
    """A connection to the todo table shared between threads."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._lock = threading.Lock()

    def __enter__(self) -> "TodoStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        try:
            with self._lock, self._connection:
                return self._connection.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def insert(self, title: str, description: Optional[str]) -> Todo:
        """Store a new, uncompleted todo and return it."""
        stamp = _now()
        return _to_todo(self._execute(
            f"INSERT INTO todos ({_COLUMNS}) VALUES (?, ?, ?, 0, ?, ?) RETURNING {_COLUMNS}",
            (str(uuid.uuid4()), title, description, stamp, stamp),
        ).fetchone())

    def list_all(self) -> list[Todo]:
        """Return every todo, newest first."""
        sql = f"SELECT {_COLUMNS} FROM todos ORDER BY created_at DESC, rowid DESC"
        return [_to_todo(row) for row in self._execute(sql).fetchall()]

    def fetch(self, todo_id: uuid.UUID) -> Optional[Todo]:
        """Return the todo with this id, or None."""
        sql = f"SELECT {_COLUMNS} FROM todos WHERE id = ?"
        return _to_todo(self._execute(sql, (str(todo_id),)).fetchone())

    def update(
        self, todo_id: uuid.UUID, title: str, description: Optional[str], completed: bool
    ) -> Optional[Todo]:
        """Overwrite a todo's fields and touch updated_at; None if it is missing."""
        return _to_todo(self._execute(
            "UPDATE todos SET title = ?, description = ?, completed = ?, "
            f"updated_at = ? WHERE id = ? RETURNING {_COLUMNS}",
            (title, description, int(completed), _now(), str(todo_id)),
        ).fetchone())

    def delete(self, todo_id: uuid.UUID) -> bool:
        """Remove a todo; return whether a row was deleted."""
        return self._execute("DELETE FROM todos WHERE id = ?", (str(todo_id),)).rowcount > 0

    def close(self) -> None:
        """Close the underlying connection."""
        with self._lock:
            self._connection.close()


def create_pool(database_url: str) -> TodoStore:
    """Open the database named by a sqlite:// URL or a plain file path."""
    parsed = urlparse(database_url)
    if parsed.scheme not in ("", "sqlite"):
        raise DatabaseError(f"unsupported database URL scheme: {parsed.scheme!r}")
    path = (parsed.netloc + parsed.path if parsed.scheme else database_url) or ":memory:"
    try:
        return TodoStore(sqlite3.connect(path, timeout=3.0, check_same_thread=False))
    except sqlite3.Error as exc:
        raise DatabaseError(str(exc)) from exc


def run_migrations(store: TodoStore) -> None:
    """Create the todo table if it does not exist yet."""
    store._execute(
        "CREATE TABLE IF NOT EXISTS todos (id TEXT PRIMARY KEY, title TEXT NOT NULL, "
        "description TEXT, completed INTEGER NOT NULL DEFAULT 0, "
        "created_at TEXT NOT NULL, updated_at TEXT NOT NULL)"
    )