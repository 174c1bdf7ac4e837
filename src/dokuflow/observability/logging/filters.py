"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

import re
from typing import Any

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "secret", "token", "api_key", "apikey", "authorization",
})

_API_KEY_RE = re.compile(r"([?&]apiKey=)[^&]*", re.IGNORECASE)


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``."""

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if k.lower() in self._fields else v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        """Recursively redact nested dicts and the ``apiKey`` of any ``url`` value."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if k.lower() in self._fields:
                result[k] = self.REDACTED
            elif isinstance(v, dict):
                result[k] = self.redact_deep(v)
            elif k == "url" and isinstance(v, str):
                result[k] = self.redact_url(v)
            else:
                result[k] = v
        return result

    @classmethod
    def redact_url(cls, url: str) -> str:
        """Mask the ``apiKey`` query parameter of a Dokuflow URL."""
        return _API_KEY_RE.sub(lambda m: m.group(1) + cls.REDACTED, url)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
