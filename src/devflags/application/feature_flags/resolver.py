"""Application feature flags – FlagResolver.

Effective value precedence, highest first:

1. the session override, when one is set;
2. the registry default, for defined flags;
3. ``None`` (absent), for dev flags and unknown keys.

Nothing here is cached. Every read goes back to the live
:class:`SessionOverrideStore`, so a write is visible to the next read.
"""
from __future__ import annotations

import dataclasses
from typing import Any

from devflags.application.feature_flags.discovery import DevFlagSource, StaticDevFlagSource
from devflags.application.feature_flags.registry import FlagRegistry
from devflags.application.feature_flags.store import SessionOverrideStore

REGISTRY_DEFAULT: Any = object()


@dataclasses.dataclass(frozen=True)
class FlagView:
    """Effective value of one flag, and whether an override produced it."""
    key: str
    value: bool | None
    is_overridden: bool

    @property
    def label(self) -> str:
        """``"true"``, ``"false (overridden)"``, ``""`` for an absent value."""
        text = "" if self.value is None else str(self.value).lower()
        return f"{text} (overridden)" if self.is_overridden else text


class FlagResolver:
    """Read-only view over registry, dev flags and session overrides."""

    def __init__(
        self,
        registry: FlagRegistry,
        store: SessionOverrideStore,
        dev_flags: DevFlagSource | None = None,
    ) -> None:
        self._registry = registry
        self._store = store
        self._dev_flags = dev_flags or StaticDevFlagSource()

    @property
    def registry(self) -> FlagRegistry:
        return self._registry

    def resolve(self, key: str, default: bool | None = REGISTRY_DEFAULT) -> bool | None:
        """Return the override for *key*, else *default*.

        When *default* is omitted the registry default is used, which is
        ``None`` for keys the registry does not define.
        """
        override = self._store.get(key)
        if override is not None:
            return override
        if default is REGISTRY_DEFAULT:
            return self._registry.default_for(key)
        return default

    def is_overridden(self, key: str) -> bool:
        return self._store.is_overridden(key)

    def has_any(self) -> bool:
        return self._store.has_any()

    def list_defined_flags(self) -> list[str]:
        return sorted(self._registry.keys())

    def list_dev_flags(self) -> list[str]:
        return sorted(
            key for key in self._dev_flags.snapshot() if key not in self._registry
        )

    def view(self, key: str) -> FlagView:
        return FlagView(key, self.resolve(key), self._store.is_overridden(key))

    def describe_defined(self) -> list[FlagView]:
        return [self.view(key) for key in self.list_defined_flags()]

    def describe_dev(self) -> list[FlagView]:
        return [self.view(key) for key in self.list_dev_flags()]


__all__ = ["REGISTRY_DEFAULT", "FlagResolver", "FlagView"]
