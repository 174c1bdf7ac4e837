"""Application-layer errors – client setup and usage problems."""

from __future__ import annotations

from dokuflow.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
