"""HTTP routes of the todo API."""

from __future__ import annotations

import json
import uuid
from http import HTTPStatus

from flask import Flask, Response, jsonify, request

from todoserver import handlers
from todoserver.db import TodoStore
from todoserver.handlers import ApiError

STORE_EXTENSION = "todoserver.store"


def _json_body():
    if not request.is_json:
        raise ApiError(
            HTTPStatus.UNSUPPORTED_MEDIA_TYPE,
            "Expected request with `Content-Type: application/json`",
        )
    try:
        return json.loads(request.get_data())
    except ValueError as exc:
        raise ApiError(
            HTTPStatus.BAD_REQUEST, f"Failed to parse the request body as JSON: {exc}"
        ) from exc


def _path_id(raw: str) -> uuid.UUID:
    try:
        return uuid.UUID(raw)
    except ValueError as exc:
        raise ApiError(
            HTTPStatus.BAD_REQUEST, f"Invalid URL: Cannot parse `{raw}` as a UUID"
        ) from exc


def create_router(store: TodoStore) -> Flask:
    """Build the web application serving /api/todos on top of store."""
    app = Flask("todoserver")
    app.json.sort_keys = False
    app.extensions[STORE_EXTENSION] = store

    @app.errorhandler(ApiError)
    def api_error(error: ApiError) -> Response:
        return Response(error.message, error.status, content_type="text/plain; charset=utf-8")

    @app.get("/api/todos")
    def get_todos():
        return jsonify([todo.to_dict() for todo in handlers.get_todos(store)])

    @app.post("/api/todos")
    def create_todo():
        return jsonify(handlers.create_todo(store, _json_body()).to_dict()), HTTPStatus.CREATED

    @app.get("/api/todos/<todo_id>")
    def get_todo(todo_id: str):
        return jsonify(handlers.get_todo(store, _path_id(todo_id)).to_dict())

    @app.put("/api/todos/<todo_id>")
    def update_todo(todo_id: str):
        parsed_id = _path_id(todo_id)
        return jsonify(handlers.update_todo(store, parsed_id, _json_body()).to_dict())

    @app.delete("/api/todos/<todo_id>")
    def delete_todo(todo_id: str):
        handlers.delete_todo(store, _path_id(todo_id))
        return Response(status=HTTPStatus.NO_CONTENT)

    return app