"""Application feature flags – SessionOverrideStore."""
from __future__ import annotations

from collections.abc import Iterator


class SessionOverrideStore:
    """Mutable ``{key: bool}`` map of the session's explicit overrides.

    Holds no policy: callers validate keys and values. Setting ``None``
    removes the key, so the map never carries a third state.
    """

    def __init__(self) -> None:
        self._overrides: dict[str, bool] = {}

    def get(self, key: str) -> bool | None:
        return self._overrides.get(key)

    def set(self, key: str, value: bool | None) -> None:
        if value is None:
            self._overrides.pop(key, None)
        else:
            self._overrides[key] = value

    def clear(self) -> None:
        self._overrides.clear()

    def is_overridden(self, key: str) -> bool:
        return key in self._overrides

    def has_any(self) -> bool:
        return bool(self._overrides)

    def snapshot(self) -> dict[str, bool]:
        """Return a copy of the current overrides."""
        return dict(self._overrides)

    def __contains__(self, key: object) -> bool:
        return key in self._overrides

    def __iter__(self) -> Iterator[str]:
        return iter(self._overrides)

    def __len__(self) -> int:
        return len(self._overrides)

    def __repr__(self) -> str:
        return f"SessionOverrideStore({self._overrides!r})"


__all__ = ["SessionOverrideStore"]
