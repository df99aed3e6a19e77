"""Infrastructure errors – payloads exchanged with persistence channels."""

from __future__ import annotations

from typing import Any

from devflags.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a flag rule violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class OverridePayloadError(SerializationError):
    """An override payload could not be decoded as a whole."""

    default_code = "override_payload_error"


__all__ = [
    "InfrastructureError",
    "OverridePayloadError",
    "SerializationError",
]
