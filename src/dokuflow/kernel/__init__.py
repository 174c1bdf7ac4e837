"""Kernel – framework-agnostic building blocks."""

from dokuflow.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ExternalServiceError,
    InfrastructureError,
    TimeoutError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "TimeoutError",
    "ValidationError",
]
