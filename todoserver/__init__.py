"""A small JSON HTTP service for keeping a list of todos in SQLite."""

__version__ = "0.1.0"