"""Textual path canonicalization.

Rewrites user-supplied path text into canonical form: no repeated separators,
no ``.`` segments and no resolvable ``..`` segments. Nothing here touches the
filesystem; symlinks are not consulted.

Rules, applied segment by segment after the anchor (``/``, ``C:`` or
``//server``) has been split off:

- empty and ``.`` segments are dropped (a leading ``.`` of a relative path is kept)
- ``..`` erases the previous named segment
- ``..`` with nothing to erase is clamped (dropped) under an anchor, and kept
  in a relative path
- the result always ends with a separator; see ``strip_trailing_separator``
"""

from __future__ import annotations

from typing import List, Tuple

from ._types import SEP, Dialect, check_capacity, has_drive, to_separators
from .classifier import is_absolute, is_unc_path


def split_anchor(path: str, dialect: Dialect = Dialect.POSIX) -> Tuple[str, str]:
    """Split ``path`` into its root anchor and the remainder.

    The anchor is ``"/"``, a drive root (``"C:/"``), a drive-relative
    prefix (``"C:"``, as in ``C:foo``), a UNC server prefix (``"//server"``),
    or ``""`` for relative paths.
    """
    path = to_separators(path, dialect)
    if dialect is Dialect.WINDOWS:
        if is_unc_path(path):
            end = path.find(SEP, 2)
            if end == -1:
                return path, ""
            return path[:end], path[end:]
        if has_drive(path):
            if len(path) == 2 or path[2] == SEP:
                return path[:2] + SEP, path[3:]
            return path[:2], path[2:]
    if path.startswith(SEP):
        return SEP, path[1:]
    return "", path


def _collapse(rest: str, anchored: bool) -> List[str]:
    stack: List[str] = []
    for seg in rest.split(SEP):
        if not seg:
            continue
        if seg == ".":
            if not stack and not anchored:
                stack.append(seg)
            continue
        if seg == "..":
            if stack and stack[-1] not in (".", ".."):
                stack.pop()
            elif anchored:
                # clamp: nothing above the root
                continue
            elif stack and stack[-1] == ".":
                stack[-1] = seg
            else:
                stack.append(seg)
            continue
        stack.append(seg)
    return stack


def segments(path: str, dialect: Dialect = Dialect.POSIX) -> Tuple[str, List[str]]:
    """Return ``(anchor, segments)`` of the canonical form of ``path``."""
    anchor, rest = split_anchor(path, dialect)
    return anchor, _collapse(rest, bool(anchor))


def canonicalize(
    raw: str, *, dialect: Dialect = Dialect.POSIX, capacity: int | None = None
) -> str:
    """Return the canonical form of ``raw``, always ending with a separator.

    Args:
        raw: Path text, possibly malformed
        dialect: Path syntax used to recognise drive and UNC prefixes
        capacity: Path budget in bytes including a terminator; ``None`` is unbounded

    Raises:
        PathTooLongError: If the result needs more than ``capacity - 1`` bytes
    """
    if not raw:
        return ""
    anchor, segs = segments(raw, dialect)
    if anchor.endswith(SEP):
        head = anchor
    elif is_unc_path(anchor):
        head = anchor + SEP
    elif anchor:
        # drive-relative text is kept as typed: C:foo stays C:foo
        head = anchor if segs else anchor + "." + SEP
    elif not segs:
        head = "." + SEP
    else:
        head = dot_prefix(segs, dialect)
    result = head + "".join(seg + SEP for seg in segs)
    return check_capacity(result, capacity)


def dot_prefix(segs: List[str], dialect: Dialect = Dialect.POSIX) -> str:
    """Return ``"./"`` when a relative path would otherwise read as a drive."""
    if dialect is Dialect.WINDOWS and segs and has_drive(segs[0]):
        return "." + SEP
    return ""


def strip_trailing_separator(path: str, *, dialect: Dialect = Dialect.POSIX) -> str:
    """Drop one trailing separator, keeping ``/`` and ``C:/`` intact."""
    path = to_separators(path, dialect)
    if not path.endswith(SEP) or path == SEP:
        return path
    if dialect is Dialect.WINDOWS and len(path) == 3 and has_drive(path):
        return path
    return path[:-1]


def join(
    base: str, *parts: str, dialect: Dialect = Dialect.POSIX, capacity: int | None = None
) -> str:
    """Join ``parts`` onto ``base`` and return the trimmed canonical result.

    An absolute part discards everything joined before it.
    """
    result = base
    for part in parts:
        if not part:
            continue
        if not result or is_absolute(part, dialect=dialect):
            result = part
        else:
            result = result + SEP + part
    canonical = canonicalize(result, dialect=dialect, capacity=capacity)
    return strip_trailing_separator(canonical, dialect=dialect)
