"""Absolute/root classification for POSIX and drive-letter/UNC path syntax."""

from __future__ import annotations

from ._types import SEP, Dialect, has_drive, to_separators


def is_unc_path(path: str) -> bool:
    """Return True for ``//server...`` (a third separator is not UNC)."""
    path = to_separators(path, Dialect.WINDOWS)
    return path.startswith("//") and len(path) > 2 and path[2] != SEP


def is_unc_root(path: str) -> bool:
    """Return True for ``//server`` or ``//server/share`` with at most a trailing separator."""
    path = to_separators(path, Dialect.WINDOWS)
    if not is_unc_path(path):
        return False
    server_end = path.find(SEP, 2)
    if server_end == -1:
        return True
    share_end = path.find(SEP, server_end + 1)
    return share_end == -1 or share_end == len(path) - 1


def is_absolute(path: str, *, dialect: Dialect = Dialect.POSIX) -> bool:
    path = to_separators(path, dialect)
    if dialect is Dialect.WINDOWS and has_drive(path):
        return True
    return path.startswith(SEP)


def is_root(path: str, *, dialect: Dialect = Dialect.POSIX) -> bool:
    path = to_separators(path, dialect)
    if dialect is Dialect.WINDOWS:
        if len(path) == 3 and has_drive(path) and path[2] == SEP:
            return True
        if is_unc_root(path):
            return True
    return path == SEP


def has_tilde_prefix(path: str) -> bool:
    """Return True if ``path`` begins with home-directory shorthand."""
    return path.startswith("~")


__all__ = [
    "has_tilde_prefix",
    "is_absolute",
    "is_root",
    "is_unc_path",
    "is_unc_root",
]
