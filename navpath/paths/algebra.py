"""Configured facade over the path algebra functions.

``PathAlgebra`` binds a dialect, a path budget, a home directory and a user
lookup once so that display and command-building code can call the
transforms without threading those values through every call.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ._types import Dialect, UserLookup
from .canonicalizer import canonicalize, join, strip_trailing_separator
from .classifier import is_absolute, is_root
from .home import abbreviate_home, default_user_lookup, expand_tilde
from .resolver import path_starts_with, relative


@dataclass(frozen=True)
class PathConfig:
    """Explicit configuration for path transforms.

    Args:
        dialect: Path syntax in effect
        capacity: Path budget in bytes including a terminator; ``None`` is unbounded
        home_dir: The current user's home directory, used for ``~``
        lookup: Resolves ``~name`` to a home directory
    """

    dialect: Dialect = Dialect.POSIX
    capacity: int | None = None
    home_dir: str = "/"
    lookup: UserLookup = field(default=default_user_lookup, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "dialect", Dialect.parse(self.dialect))
        if self.capacity is not None and self.capacity < 2:
            raise ValueError(f"capacity must be at least 2, got: {self.capacity}")

    @classmethod
    def from_settings(cls, settings, lookup: UserLookup = default_user_lookup) -> "PathConfig":
        return cls(
            dialect=settings.dialect,
            capacity=settings.path_capacity,
            home_dir=settings.home_dir,
            lookup=lookup,
        )


class PathAlgebra:
    """Path transforms bound to a ``PathConfig``."""

    def __init__(self, config: PathConfig | None = None) -> None:
        self.config = config or PathConfig()

    @property
    def dialect(self) -> Dialect:
        return self.config.dialect

    def canonicalize(self, raw: str) -> str:
        return canonicalize(raw, dialect=self.dialect, capacity=self.config.capacity)

    def normalize(self, raw: str) -> str:
        """Canonicalize ``raw`` and drop the trailing separator (roots stay intact)."""
        return strip_trailing_separator(self.canonicalize(raw), dialect=self.dialect)

    def relative(self, path: str, base: str) -> str:
        return relative(path, base, dialect=self.dialect, capacity=self.config.capacity)

    def join(self, base: str, *parts: str) -> str:
        return join(base, *parts, dialect=self.dialect, capacity=self.config.capacity)

    def is_absolute(self, path: str) -> bool:
        return is_absolute(path, dialect=self.dialect)

    def is_root(self, path: str) -> bool:
        return is_root(path, dialect=self.dialect)

    def starts_with(self, path: str, prefix: str) -> bool:
        return path_starts_with(path, prefix, dialect=self.dialect)

    def expand(self, path: str) -> str:
        return expand_tilde(
            path, self.config.home_dir, self.config.lookup, dialect=self.dialect
        )

    def abbreviate(self, path: str) -> str:
        return abbreviate_home(path, self.config.home_dir, dialect=self.dialect)

    def resolve_input(self, raw: str, cwd: str) -> str:
        """Turn user-typed ``raw`` into a trimmed canonical path under ``cwd``.

        Home shorthand is expanded before canonicalization; relative input is
        joined onto ``cwd``.
        """
        return self.join(cwd, self.expand(raw))


__all__ = ["PathAlgebra", "PathConfig"]
