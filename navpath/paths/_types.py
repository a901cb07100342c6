from __future__ import annotations

import re
from enum import Enum
from typing import Callable

SEP = "/"

_DRIVE_RE = re.compile(r"^[A-Za-z]:")


class Dialect(str, Enum):
    """Path syntax variant governing separators and root detection."""

    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def parse(cls, value: "str | Dialect") -> "Dialect":
        if isinstance(value, Dialect):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"unknown path dialect: {value!r}") from None


class NavPathError(ValueError):
    """Base class for path algebra failures reported to callers."""


class PathTooLongError(NavPathError):
    """Raised when a result does not fit in the caller's path budget."""

    def __init__(self, length: int, capacity: int) -> None:
        super().__init__(f"path too long: {length} bytes do not fit capacity {capacity}")
        self.length = length
        self.capacity = capacity


class UserNotFoundError(LookupError):
    """Raised by user lookups when no home directory is known for a name."""


# name -> home directory; raises UserNotFoundError (or KeyError) when unknown
UserLookup = Callable[[str], str]


def to_separators(path: str, dialect: Dialect) -> str:
    """Rewrite alternate separators to ``/`` for the given dialect."""
    if dialect is Dialect.WINDOWS:
        return path.replace("\\", SEP)
    return path


def has_drive(path: str) -> bool:
    return bool(_DRIVE_RE.match(path))


def check_capacity(path: str, capacity: int | None) -> str:
    """Return ``path`` if it fits ``capacity`` (terminator included)."""
    if capacity is None:
        return path
    length = len(path.encode("utf-8"))
    if length > capacity - 1:
        raise PathTooLongError(length, capacity)
    return path
