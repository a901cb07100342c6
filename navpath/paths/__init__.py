"""Path algebra for the navigation layer: canonical form, relative paths, roots, home shorthand."""

from ._types import Dialect, NavPathError, PathTooLongError, UserLookup, UserNotFoundError
from .algebra import PathAlgebra, PathConfig
from .canonicalizer import canonicalize, join, strip_trailing_separator
from .classifier import is_absolute, is_root, is_unc_path, is_unc_root
from .home import abbreviate_home, default_user_lookup, expand_tilde
from .resolver import path_starts_with, relative

__all__ = [
    "Dialect",
    "NavPathError",
    "PathAlgebra",
    "PathConfig",
    "PathTooLongError",
    "UserLookup",
    "UserNotFoundError",
    "abbreviate_home",
    "canonicalize",
    "default_user_lookup",
    "expand_tilde",
    "is_absolute",
    "is_root",
    "is_unc_path",
    "is_unc_root",
    "join",
    "path_starts_with",
    "relative",
    "strip_trailing_separator",
]
