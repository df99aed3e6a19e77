"""Application feature flags – OverrideController.

The only write path into a session's overrides. Besides mutating the
store it owns the visibility of the override-entry surface and tells
subscribers about both, so a persistence channel can export the map or
start/stop carrying it across navigation.
"""
from __future__ import annotations

import dataclasses
import enum
from collections.abc import Mapping
from typing import Callable, Union

from devflags.application.feature_flags.registry import validate_key
from devflags.application.feature_flags.store import SessionOverrideStore
from devflags.kernel.errors import InvalidOverrideValueError, ValidationError
from devflags.observability.logging import get_logger

logger = get_logger(__name__)


def _require_bool(name: str, value: object) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(
            f"{name} must be a bool, got {value!r}",
            errors=[{"field": name, "value": repr(value)}],
        )
    return value


class Visibility(str, enum.Enum):
    """Whether the override-entry surface is exposed."""

    HIDDEN = "hidden"
    VISIBLE = "visible"


@dataclasses.dataclass(frozen=True)
class OverridesChanged:
    """Emitted after every override write or reset."""
    overrides: dict[str, bool]


@dataclasses.dataclass(frozen=True)
class VisibilityChanged:
    """Intent to expose (and persist) or hide the override surface."""
    visible: bool
    overrides: dict[str, bool]


ControllerEvent = Union[OverridesChanged, VisibilityChanged]
Listener = Callable[[ControllerEvent], None]


class OverrideController:
    """Mutation surface over a :class:`SessionOverrideStore`."""

    def __init__(self, store: SessionOverrideStore, *, visible: bool = False) -> None:
        self._store = store
        self._visibility = Visibility.VISIBLE if visible else Visibility.HIDDEN
        self._listeners: list[Listener] = []

    @property
    def visibility(self) -> Visibility:
        return self._visibility

    @property
    def is_visible(self) -> bool:
        return self._visibility is Visibility.VISIBLE

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; the returned callable unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_override(self, key: str, value: bool | None) -> None:
        """Override *key* for this session; ``None`` clears the override.

        Keys outside the registry are accepted.
        """
        validate_key(key)
        if value is not None and not isinstance(value, bool):
            raise InvalidOverrideValueError(key, value)
        self._store.set(key, value)
        logger.debug("flag_override_set", flag=key, value=value)
        self._emit(OverridesChanged(self._store.snapshot()))

    def import_overrides(self, overrides: Mapping[str, bool]) -> None:
        """Merge already-sanitized overrides, e.g. restored from a channel."""
        for key, value in overrides.items():
            validate_key(key)
            if not isinstance(value, bool):
                raise InvalidOverrideValueError(key, value)
        for key, value in overrides.items():
            self._store.set(key, value)
        logger.debug("flag_overrides_imported", count=len(overrides))
        self._emit(OverridesChanged(self._store.snapshot()))

    def reset_overrides(self, hide: bool) -> None:
        """Drop every override, and hide the override surface if *hide*."""
        _require_bool("hide", hide)
        count = len(self._store)
        self._store.clear()
        logger.debug("flag_overrides_reset", count=count, hide=hide)
        self._emit(OverridesChanged({}))
        if hide:
            self.set_visibility(False)

    def set_visibility(self, visible: bool) -> None:
        _require_bool("visible", visible)
        self._visibility = Visibility.VISIBLE if visible else Visibility.HIDDEN
        logger.debug("flag_overrides_visibility", visibility=self._visibility.value)
        self._emit(VisibilityChanged(visible, self._store.snapshot()))

    def _emit(self, event: ControllerEvent) -> None:
        for listener in list(self._listeners):
            listener(event)


__all__ = [
    "ControllerEvent",
    "Listener",
    "OverrideController",
    "OverridesChanged",
    "Visibility",
    "VisibilityChanged",
]
