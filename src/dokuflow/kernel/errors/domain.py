"""Domain errors – malformed query options and documents."""

from __future__ import annotations

from typing import Any

from dokuflow.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a value breaks the document model's rules."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Query options reference unknown fields or carry ill-shaped values.

    ``errors`` is a list of ``{"field": ..., "reason": ...}`` entries, one per
    offending field.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


__all__ = ["DomainError", "ValidationError"]
