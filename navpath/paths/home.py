"""Home-directory shorthand: ``~`` and ``~user`` expansion and abbreviation."""

from __future__ import annotations

import functools
import logging

from ._types import SEP, Dialect, UserLookup, UserNotFoundError, to_separators
from .canonicalizer import strip_trailing_separator
from .classifier import has_tilde_prefix, is_root
from .resolver import path_starts_with

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=128)
def default_user_lookup(name: str) -> str:
    """Look up ``name`` in the passwd database and return its home directory.

    Raises:
        UserNotFoundError: If the user is unknown or there is no passwd database
    """
    try:
        import pwd
    except ImportError:
        raise UserNotFoundError(name) from None
    try:
        return pwd.getpwnam(name).pw_dir
    except KeyError:
        raise UserNotFoundError(name) from None


def _substitute(directory: str, remainder: str, dialect: Dialect) -> str:
    directory = to_separators(directory, dialect)
    if not remainder:
        return strip_trailing_separator(directory, dialect=dialect)
    return directory.rstrip(SEP) + remainder


def expand_tilde(
    path: str,
    home_dir: str,
    lookup: UserLookup = default_user_lookup,
    *,
    dialect: Dialect = Dialect.POSIX,
) -> str:
    """Replace a leading ``~`` or ``~name`` with the matching home directory.

    ``~`` and ``~/...`` use ``home_dir``; ``~name`` asks ``lookup``. Unknown
    users leave ``path`` untouched, since ``~nosuch`` is a valid literal name.
    """
    if not has_tilde_prefix(path):
        return path

    converted = to_separators(path, dialect)
    sep_at = converted.find(SEP)
    name = converted[1:] if sep_at == -1 else converted[1:sep_at]
    remainder = "" if sep_at == -1 else converted[sep_at:]

    if not name:
        return _substitute(home_dir, remainder, dialect)

    try:
        directory = lookup(name)
    except (UserNotFoundError, KeyError):
        logger.debug(f"No home directory for user {name!r}; leaving path as is")
        return path
    return _substitute(directory, remainder, dialect)


def abbreviate_home(path: str, home_dir: str, *, dialect: Dialect = Dialect.POSIX) -> str:
    """Replace a ``home_dir`` prefix of ``path`` with ``~`` for display.

    A root home directory is never abbreviated. The result has no trailing
    separator unless it is a root.
    """
    path = to_separators(path, dialect)
    home = strip_trailing_separator(to_separators(home_dir, dialect), dialect=dialect)
    abbreviate = (
        home
        and not is_root(home, dialect=dialect)
        and path.startswith(home)
        and path_starts_with(path, home, dialect=dialect)
    )
    if abbreviate:
        path = "~" + path[len(home):]
    if is_root(path, dialect=dialect):
        return path
    return strip_trailing_separator(path, dialect=dialect)


__all__ = ["abbreviate_home", "default_user_lookup", "expand_tilde"]
