"""Structured logging for navpath."""

from .redaction import DataRedactor
from .structured import LogLevel, StructuredLogger, create_logger

__all__ = [
    "DataRedactor",
    "LogLevel",
    "StructuredLogger",
    "create_logger",
]
