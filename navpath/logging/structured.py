"""JSON-lines records for navpath tools, one object per line."""

from __future__ import annotations

import json
import os
import sys
import time
import uuid
from enum import Enum
from functools import partialmethod
from pathlib import Path
from typing import Any, Optional, TextIO, Union

from .redaction import DataRedactor


class LogLevel(Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class StructuredLogger:
    """Write redacted records to an optional file and, with ``enable_console``, stderr.

    A path given as ``output_file`` is opened (and later closed) by the
    logger; an open stream is borrowed and left open.
    """

    def __init__(
        self,
        component: str,
        session_id: Optional[str] = None,
        output_file: Optional[Union[str, Path, TextIO]] = None,
        enable_console: bool = False,
        redactor: Optional[DataRedactor] = None,
    ) -> None:
        self.component = component
        self.session_id = session_id or uuid.uuid4().hex[:8]
        self.redactor = redactor or DataRedactor()
        self.console_enabled = enable_console
        self._owns_file = isinstance(output_file, (str, Path))
        if self._owns_file:
            path = Path(output_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            output_file = path.open("a", encoding="utf-8")
        self.log_file: Optional[TextIO] = output_file or None

    def log(self, level: LogLevel, message: str, **context: Any) -> None:
        now = time.time()
        record = {
            "timestamp": now,
            "iso_timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(now)),
            "level": level.value,
            "component": self.component,
            "session_id": self.session_id,
            "message": message,
            **self.redactor.redact_dict(context),
        }
        line = json.dumps(record, default=str, separators=(",", ":"))
        if self.console_enabled:
            print(line, file=sys.stderr, flush=True)
        if self.log_file:
            self.log_file.write(line + "\n")
            self.log_file.flush()

    debug = partialmethod(log, LogLevel.DEBUG)
    info = partialmethod(log, LogLevel.INFO)
    warning = partialmethod(log, LogLevel.WARNING)
    error = partialmethod(log, LogLevel.ERROR)

    def close(self) -> None:
        if self.log_file and self._owns_file:
            self.log_file.close()
        self.log_file = None


def create_logger(
    component: str,
    session_id: Optional[str] = None,
    log_dir: Optional[Union[str, Path]] = None,
    **kwargs: Any,
) -> StructuredLogger:
    """Return a logger for ``component``, filed under ``log_dir`` when one is set.

    ``log_dir`` falls back to ``NAVPATH_LOG_DIR``; records go to
    ``<component>_<session_id or 'default'>.jsonl``.
    """
    log_dir = log_dir or os.getenv("NAVPATH_LOG_DIR")
    output_file = None
    if log_dir:
        output_file = Path(log_dir) / f"{component}_{session_id or 'default'}.jsonl"
    return StructuredLogger(component, session_id=session_id, output_file=output_file, **kwargs)
