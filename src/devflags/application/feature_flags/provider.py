"""Application feature flags – FeatureFlagProvider port."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any

from devflags.application.feature_flags.registry import FlagDefinition

if TYPE_CHECKING:
    from devflags.application.feature_flags.session import DevFlagsSession


class FeatureFlagProvider(abc.ABC):
    """Port: evaluate feature flags for a given context."""

    @abc.abstractmethod
    async def is_enabled(self, flag: FlagDefinition | str, context: dict[str, Any] | None = None) -> bool: ...


class SessionFeatureFlagProvider(FeatureFlagProvider):
    """Answers from a session's effective values.

    Falls back to the flag's own default, then to ``False``.
    """

    def __init__(self, session: DevFlagsSession) -> None:
        self._session = session

    async def is_enabled(
        self, flag: FlagDefinition | str, context: dict[str, Any] | None = None
    ) -> bool:
        if isinstance(flag, FlagDefinition):
            value = self._session.resolve(flag.key)
            if value is None:
                value = flag.default_value
        else:
            value = self._session.resolve(flag)
        return bool(value)


__all__ = ["FeatureFlagProvider", "SessionFeatureFlagProvider"]
