"""Application feature flags – dev-flag discovery port."""
from __future__ import annotations

import abc
from collections.abc import Iterable


class DevFlagSource(abc.ABC):
    """Port: report flags referenced at runtime but absent from the registry."""

    @abc.abstractmethod
    def snapshot(self) -> frozenset[str]: ...


class StaticDevFlagSource(DevFlagSource):
    """Fixed set of dev flags, e.g. from settings."""

    def __init__(self, flags: Iterable[str] = ()) -> None:
        self._flags = frozenset(flag for flag in flags if flag)

    def snapshot(self) -> frozenset[str]:
        return self._flags


__all__ = ["DevFlagSource", "StaticDevFlagSource"]
