"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Dataclass settings whose fields are read from ``<PREFIX>_<FIELD>``.

    Subclasses set ``_prefix`` and may override :meth:`_validate`, which
    runs after construction and may normalise fields in place.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Hook for cross-field validation."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable that carries *field_name*."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")


__all__ = ["Settings"]
