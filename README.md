# todoserver

A small HTTP service that keeps a list of todos in an SQLite database and
serves them as JSON.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

The server reads its settings from the environment. A `.env` file found from
the working directory is read too, which is handy during development.

| Variable       | Required | Default   | Meaning                                   |
|----------------|----------|-----------|-------------------------------------------|
| `DATABASE_URL` | yes      |           | SQLite database to use (see below)        |
| `HOST`         | no       | `0.0.0.0` | Address the server binds to               |
| `PORT`         | no       | `8080`    | Port the server listens on, 0 to 65535    |
| `LOG_LEVEL`    | no       | `debug`   | `trace`, `debug`, `info`, `warn`, `warning`, `error` or `critical` |

`DATABASE_URL` is either a plain file path (`todos.db`) or a `sqlite://` URL
(`sqlite:///var/lib/todos.db` for an absolute path). An empty path opens an
in-memory database. Any other URL scheme is refused.

Start it with:

```
todoserver
```

On start-up the server opens the database, creates the `todos` table if it is
not there yet, and then serves on `HOST:PORT`. If `DATABASE_URL` is missing,
`PORT` is not a number, or the database cannot be opened, the error is logged
and the command exits with status 1.

## API

Every request and response body is JSON, except error messages, which are
plain text. Each todo looks like this:

```json
{
  "id": "5b0f8c1e-2a4d-4e39-9a53-3f1f7a3c9e21",
  "title": "Buy milk",
  "description": "Semi-skimmed",
  "completed": false,
  "created_at": "2024-01-01T09:00:00.123456Z",
  "updated_at": "2024-01-01T09:00:00.123456Z"
}
```

Timestamps are in UTC; the fractional part is left out when it is zero and
shortened to milliseconds when that loses nothing.

| Method   | Path              | What it does                         | Success |
|----------|-------------------|--------------------------------------|---------|
| `GET`    | `/api/todos`      | List all todos, newest first         | 200     |
| `POST`   | `/api/todos`      | Create a todo                        | 201     |
| `GET`    | `/api/todos/<id>` | Fetch one todo                       | 200     |
| `PUT`    | `/api/todos/<id>` | Change some fields of a todo         | 200     |
| `DELETE` | `/api/todos/<id>` | Remove a todo (no body returned)     | 204     |

### Creating

`title` is required and must be a string; `description` may be left out or
set to `null`. A new todo starts out not completed.

```json
{"title": "Buy milk", "description": "Semi-skimmed"}
```

### Updating

Send only the fields you want to change: `title` (string), `description`
(string) and `completed` (boolean). A field that is left out or set to `null`
keeps its current value, so a description can be replaced but not cleared.
Every update sets `updated_at` to the current time.

```json
{"completed": true}
```

### Errors

| Status | When                                                           |
|--------|----------------------------------------------------------------|
| 400    | The body is not valid JSON, or `<id>` is not a UUID            |
| 404    | No todo has this id (`Todo with id ... not found`)             |
| 415    | A `POST` or `PUT` without `Content-Type: application/json`     |
| 422    | The body is not an object, or a field is missing or mistyped   |
| 500    | The database failed; the message names the operation           |

## Using it from Python

The pieces can be put together directly, for example in tests:

```python
from todoserver.config import load_config
from todoserver.main import build_app

config = load_config({"DATABASE_URL": "todos.db"})
app = build_app(config)
client = app.test_client()
print(client.get("/api/todos").get_json())
```

`todoserver.handlers` holds the operations behind each endpoint
(`create_todo`, `get_todos`, `get_todo`, `update_todo`, `delete_todo`); they
take a `todoserver.db.TodoStore` and raise `ApiError`, which carries a
`status` and a `message`. `todoserver.logsetup.init()` sets up the
`todoserver` logger once; later calls change nothing.

## What it does not do

- Storage is SQLite only; other database servers are not supported.
- The `todoserver` command serves through Flask's built-in server. For
  production use, hand the application from `build_app` to a WSGI server.
- There is no authentication and no cross-origin (CORS) handling.