"""navpath runtime settings.

All settings are backed by environment variables following the NAVPATH_*
naming convention and are read once, at import.

Example:
    >>> from navpath.config import settings
    >>> settings.path_capacity
    8192

Environment Variables:
    NAVPATH_DIALECT: Path syntax, one of posix|windows|auto (default: auto)
    NAVPATH_PATH_CAPACITY: Path budget in bytes, terminator included (default: 8192)
    NAVPATH_HOME: Home directory used for "~" (default: the current user's home)
    NAVPATH_LOG_DIR: Directory for JSON-lines logs (default: unset, no log file)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from navpath.paths import Dialect

# Twice a 4096-byte PATH_MAX, leaving room for "../" expansion.
DEFAULT_PATH_CAPACITY = 2 * 4096


def _env(name: str, default: str) -> str:
    """Get environment variable with NAVPATH_* prefix validation."""
    if not name.startswith("NAVPATH_"):
        raise ValueError(f"Only NAVPATH_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_int(name: str, default: int) -> int:
    raw = _env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def _env_dialect(name: str) -> Dialect:
    raw = _env(name, "auto")
    try:
        return Dialect.parse(raw)
    except ValueError:
        # "auto" and anything unrecognised follow the host
        return Dialect.WINDOWS if os.name == "nt" else Dialect.POSIX


def _default_home() -> str:
    try:
        return str(Path.home())
    except RuntimeError:
        return "/"


@dataclass(frozen=True)
class Settings:
    """Centralized runtime settings for navpath.

    This dataclass is frozen; tests override environment variables and
    reload this module.
    """

    dialect: Dialect = _env_dialect("NAVPATH_DIALECT")
    path_capacity: int = _env_int("NAVPATH_PATH_CAPACITY", DEFAULT_PATH_CAPACITY)
    home_dir: str = _env("NAVPATH_HOME", "") or _default_home()
    log_dir: str | None = _env("NAVPATH_LOG_DIR", "") or None


settings = Settings()

__all__ = ["DEFAULT_PATH_CAPACITY", "Settings", "settings"]
