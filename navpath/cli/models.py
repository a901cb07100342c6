"""JSON result envelope printed by ``navpath --json``."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from navpath.paths import Dialect


class Operation(str, Enum):
    CANONICALIZE = "canonicalize"
    RELATIVE = "relative"
    CLASSIFY = "classify"
    EXPAND = "expand"
    ABBREVIATE = "abbreviate"


class PathResult(BaseModel):
    """Outcome of one path transform."""

    v: int = Field(default=1, description="Schema version")
    op: Operation = Field(description="Transform that produced this result")
    dialect: Dialect = Field(description="Path syntax in effect")
    input: List[str] = Field(description="Arguments as given on the command line")
    output: Optional[str] = Field(default=None, description="Transformed path text")
    absolute: Optional[bool] = Field(default=None, description="Set by classify")
    root: Optional[bool] = Field(default=None, description="Set by classify")
    error: Optional[str] = Field(default=None, description="Failure message, if any")
