"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   │   ├── InvalidFlagKeyError
    │   │   └── InvalidOverrideValueError
    │   └── ConflictError
    │       └── DuplicateFlagError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError
            └── OverridePayloadError
"""

from devflags.kernel.errors.application import ApplicationError
from devflags.kernel.errors.base import BaseError
from devflags.kernel.errors.domain import (
    ConflictError,
    DomainError,
    DuplicateFlagError,
    InvalidFlagKeyError,
    InvalidOverrideValueError,
    ValidationError,
)
from devflags.kernel.errors.infrastructure import (
    InfrastructureError,
    OverridePayloadError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "DuplicateFlagError",
    "InfrastructureError",
    "InvalidFlagKeyError",
    "InvalidOverrideValueError",
    "OverridePayloadError",
    "SerializationError",
    "ValidationError",
]
