"""Command that starts the todo API server."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from dotenv import find_dotenv, load_dotenv
from flask import Flask

from todoserver import logsetup
from todoserver.config import Config, ConfigError, load_config
from todoserver.db import DatabaseError, create_pool, run_migrations
from todoserver.routes import STORE_EXTENSION, create_router

_log = logging.getLogger("todoserver.main")


def build_app(config: Config) -> Flask:
    """Open the database, bring its schema up to date and build the app."""
    _log.info("Connecting to database...")
    store = create_pool(config.database_url)
    _log.info("Running migrations...")
    try:
        run_migrations(store)
    except DatabaseError:
        store.close()
        raise
    return create_router(store)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read the configuration from the environment and serve the API."""
    logsetup.init()
    load_dotenv(find_dotenv(usecwd=True))
    try:
        config = load_config()
        _log.info("Configuration loaded: %r", config)
        app = build_app(config)
    except (ConfigError, DatabaseError) as exc:
        _log.error("%s", exc)
        return 1

    _log.info("Server starting on %s:%s", config.host, config.port)
    try:
        app.run(host=config.host, port=config.port)
    finally:
        app.extensions[STORE_EXTENSION].close()
    return 0