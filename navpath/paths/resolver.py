"""Relative path computation between two locations.

Comparison is always by whole segments, never by raw text prefix, so
``/foo`` is not taken as a parent of ``/foobar``.
"""

from __future__ import annotations

import logging

from ._types import SEP, Dialect, check_capacity
from .canonicalizer import canonicalize, dot_prefix, segments, strip_trailing_separator

logger = logging.getLogger(__name__)


def _named(segs: list[str]) -> list[str]:
    # a leading "." of a relative path is not a step
    return segs[1:] if segs[:1] == ["."] else segs


def _common_length(left: list[str], right: list[str]) -> int:
    n = 0
    for a, b in zip(left, right):
        if a != b:
            break
        n += 1
    return n


def relative(
    path: str, base: str, *, dialect: Dialect = Dialect.POSIX, capacity: int | None = None
) -> str:
    """Return the shortest textual path leading from ``base`` to ``path``.

    When the two have different anchors (drive letters, UNC servers, or one
    absolute and one relative) there is no common root to climb from and the
    trimmed canonical ``path`` is returned instead. ``"."`` means both name
    the same location.
    """
    path_anchor, path_segs = segments(path, dialect)
    base_anchor, base_segs = segments(base, dialect)

    if path_anchor != base_anchor:
        logger.debug(f"No common root between {path!r} and {base!r}")
        return _unresolved(path, dialect, capacity)

    path_segs, base_segs = _named(path_segs), _named(base_segs)
    shared = _common_length(path_segs, base_segs)
    if ".." in base_segs[shared:]:
        # climbing out of base would need the names of its parents
        logger.debug(f"Base {base!r} climbs above its start; keeping {path!r}")
        return _unresolved(path, dialect, capacity)

    steps = [".."] * (len(base_segs) - shared) + path_segs[shared:]
    result = dot_prefix(steps, dialect) + SEP.join(steps) if steps else "."
    return check_capacity(result, capacity)


def _unresolved(path: str, dialect: Dialect, capacity: int | None) -> str:
    result = strip_trailing_separator(canonicalize(path, dialect=dialect), dialect=dialect)
    return check_capacity(result, capacity)


def path_starts_with(path: str, prefix: str, *, dialect: Dialect = Dialect.POSIX) -> bool:
    """Return True if ``prefix`` names ``path`` or one of its ancestors.

    Both arguments are compared in canonical form, segment by segment.
    """
    path_anchor, path_segs = segments(path, dialect)
    prefix_anchor, prefix_segs = segments(prefix, dialect)
    path_segs, prefix_segs = _named(path_segs), _named(prefix_segs)
    if path_anchor != prefix_anchor or len(prefix_segs) > len(path_segs):
        return False
    return path_segs[: len(prefix_segs)] == prefix_segs


__all__ = ["path_starts_with", "relative"]
