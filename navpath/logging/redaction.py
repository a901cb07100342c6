"""Redaction of user-identifying path fragments in log data."""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional, Pattern

REDACTED = "[REDACTED]"


class DataRedactor:
    """Hide home directories and sensitive fields before log records are written."""

    def __init__(
        self,
        home_dirs: Iterable[str] = (),
        custom_patterns: Optional[List[Pattern[str]]] = None,
    ) -> None:
        """Initialize redactor.

        Args:
            home_dirs: Explicit home directories to hide (e.g. the configured home)
            custom_patterns: Additional regex patterns to redact
        """
        self.patterns: List[Pattern[str]] = [
            re.compile(r"/home/[^/\s]+"),
            re.compile(r"/Users/[^/\s]+"),
            re.compile(r"[A-Za-z]:[\\/]Users[\\/][^\\/\s]+"),
        ]
        for home in home_dirs:
            home = home.rstrip("/\\")
            if home:
                # longest match first: explicit homes go before the generic ones
                self.patterns.insert(0, re.compile(re.escape(home) + r"(?=[/\\]|$|\s)"))
        if custom_patterns:
            self.patterns.extend(custom_patterns)

        self.sensitive_fields = {"password", "token", "secret", "api_key", "credential"}

    def redact_string(self, text: str) -> str:
        for pattern in self.patterns:
            text = pattern.sub(REDACTED, text)
        return text

    def redact_value(self, value: Any) -> Any:
        if isinstance(value, str):
            return self.redact_string(value)
        if isinstance(value, dict):
            return self.redact_dict(value)
        if isinstance(value, (list, tuple)):
            return [self.redact_value(item) for item in value]
        return value

    def redact_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively redact a mapping; sensitive keys are replaced wholesale."""
        result: Dict[str, Any] = {}
        for key, value in data.items():
            if key.lower() in self.sensitive_fields:
                result[key] = REDACTED
            else:
                result[key] = self.redact_value(value)
        return result
