"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (dokuflow.config.validation)
    └── InfrastructureError  (infrastructure.py)
        ├── TimeoutError
        └── ExternalServiceError
"""

from dokuflow.kernel.errors.application import ApplicationError
from dokuflow.kernel.errors.base import BaseError
from dokuflow.kernel.errors.domain import DomainError, ValidationError
from dokuflow.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    TimeoutError,
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
