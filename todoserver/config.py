"""Server settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


class ConfigError(Exception):
    """Raised when the environment does not hold a usable configuration."""


@dataclass(frozen=True)
class Config:
    """Application settings."""

    database_url: str
    host: str = "0.0.0.0"
    port: int = 8080


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """Build a Config from DATABASE_URL (required), HOST and PORT."""
    env = os.environ if environ is None else environ
    if "DATABASE_URL" not in env:
        raise ConfigError("environment variable DATABASE_URL is not set")
    raw_port = env.get("PORT", "8080")
    digits = raw_port[1:] if raw_port.startswith("+") else raw_port
    if not (digits.isascii() and digits.isdigit()) or int(digits) > 65535:
        raise ConfigError(f"PORT must be a number, got {raw_port!r}")
    return Config(env["DATABASE_URL"], env.get("HOST", "0.0.0.0"), int(digits))