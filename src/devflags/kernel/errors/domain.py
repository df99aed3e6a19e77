"""Domain errors – invalid flag identifiers, values and registries."""

from __future__ import annotations

from typing import Any

from devflags.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a flag rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
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


class InvalidFlagKeyError(ValidationError):
    """A flag identifier is not a non-empty string."""

    default_code = "invalid_flag_key"

    def __init__(self, key: object, **kwargs: Any) -> None:
        super().__init__(
            f"Flag identifier must be a non-empty string, got {key!r}",
            errors=[{"field": "key", "value": repr(key)}],
            **kwargs,
        )
        self.key = key


class InvalidOverrideValueError(ValidationError):
    """An override value is neither a boolean nor ``None``."""

    default_code = "invalid_override_value"

    def __init__(self, key: str, value: object, **kwargs: Any) -> None:
        super().__init__(
            f"Override for '{key}' must be a bool or None, got {value!r}",
            errors=[{"field": "value", "key": key, "value": repr(value)}],
            **kwargs,
        )
        self.key = key
        self.value = value


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


class DuplicateFlagError(ConflictError):
    """A flag identifier appears more than once in a registry."""

    default_code = "duplicate_flag"

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(f"Flag '{key}' is registered more than once", **kwargs)
        self.key = key


__all__ = [
    "ConflictError",
    "DomainError",
    "DuplicateFlagError",
    "InvalidFlagKeyError",
    "InvalidOverrideValueError",
    "ValidationError",
]
