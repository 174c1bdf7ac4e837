"""Root error class for the dokuflow error hierarchy."""

from __future__ import annotations

import json
from typing import Any

from dokuflow.observability.logging.filters import SensitiveFieldsFilter


class BaseError(Exception):
    """Root of every error the client raises.

    ``code`` is a stable slug callers can branch on; ``detail`` carries the
    structured context (offending setting, HTTP status, ...). When the error
    was raised ``from`` an httpx or parsing error, ``to_dict()`` reports that
    chained exception under ``cause`` with any ``apiKey`` masked.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.__cause__ is not None:
            payload["cause"] = SensitiveFieldsFilter.redact_url(
                f"{type(self.__cause__).__name__}: {self.__cause__}"
            )
        return payload


__all__ = ["BaseError"]
