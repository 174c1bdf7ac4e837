"""Infrastructure errors – transport failures talking to the Dokuflow API."""

from __future__ import annotations

from typing import Any

from dokuflow.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not caused by the caller's query."""

    default_code = "infrastructure_error"


class TimeoutError(InfrastructureError):  # noqa: A001
    """An HTTP request exceeded its deadline."""

    default_code = "infrastructure_timeout"


class ExternalServiceError(InfrastructureError):
    """The Dokuflow API answered with an error status or could not be reached."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


__all__ = ["ExternalServiceError", "InfrastructureError", "TimeoutError"]
