"""Application feature flags – DevFlagsSession."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable

from devflags.application.feature_flags.codec import DECODERS, decode_query, sanitize_overrides
from devflags.application.feature_flags.controller import Listener, OverrideController, Visibility
from devflags.application.feature_flags.discovery import DevFlagSource, StaticDevFlagSource
from devflags.application.feature_flags.registry import FlagRegistry
from devflags.application.feature_flags.resolver import REGISTRY_DEFAULT, FlagResolver, FlagView
from devflags.application.feature_flags.store import SessionOverrideStore
from devflags.config.settings import DevFlagsSettings
from devflags.kernel.errors import OverridePayloadError, ValidationError
from devflags.observability.logging import configure_logging, get_logger

logger = get_logger(__name__)


class DevFlagsSession:
    """One session's override state, wired to a registry and dev flags.

    Usage::

        registry = FlagRegistry.from_config(["disableHome"], {"disableHome": False})
        session = DevFlagsSession(registry, dev_flags=["experimentalChat"])
        session.set_override("disableHome", True)
        session.resolve("disableHome")   # True
        session.reset_overrides(hide=False)

    *initial_overrides* may come straight from a persistence channel:
    malformed entries are dropped and the rest are loaded.
    """

    def __init__(
        self,
        registry: FlagRegistry,
        dev_flags: DevFlagSource | Iterable[str] | None = None,
        initial_overrides: Mapping[Any, Any] | None = None,
        *,
        visible: bool = False,
    ) -> None:
        if dev_flags is not None and not isinstance(dev_flags, DevFlagSource):
            dev_flags = StaticDevFlagSource(dev_flags)
        self.store = SessionOverrideStore()
        self.resolver = FlagResolver(registry, self.store, dev_flags)
        self.controller = OverrideController(self.store, visible=visible)
        if initial_overrides:
            self.controller.import_overrides(sanitize_overrides(initial_overrides))

    @classmethod
    def from_settings(cls, settings: DevFlagsSettings, registry: FlagRegistry) -> DevFlagsSession:
        """Configure logging from *settings*, then open a session from them."""
        configure_logging(settings.log_level, json=settings.json_logs)
        return cls(
            registry,
            dev_flags=settings.dev_flags,
            initial_overrides=decode_query(settings.initial_overrides),
            visible=settings.visible,
        )

    # ------------------------------------------------------------------
    # Read API
    # ------------------------------------------------------------------

    def resolve(self, key: str, default: bool | None = REGISTRY_DEFAULT) -> bool | None:
        return self.resolver.resolve(key, default)

    def is_overridden(self, key: str) -> bool:
        return self.resolver.is_overridden(key)

    def has_any(self) -> bool:
        return self.resolver.has_any()

    def list_defined_flags(self) -> list[str]:
        return self.resolver.list_defined_flags()

    def list_dev_flags(self) -> list[str]:
        return self.resolver.list_dev_flags()

    def describe_defined(self) -> list[FlagView]:
        return self.resolver.describe_defined()

    def describe_dev(self) -> list[FlagView]:
        return self.resolver.describe_dev()

    @property
    def banner_visible(self) -> bool:
        """The override banner shows while any override is active."""
        return self.store.has_any()

    @property
    def visibility(self) -> Visibility:
        return self.controller.visibility

    # ------------------------------------------------------------------
    # Write API
    # ------------------------------------------------------------------

    def set_override(self, key: str, value: bool | None) -> None:
        self.controller.set_override(key, value)

    def reset_overrides(self, hide: bool) -> None:
        self.controller.reset_overrides(hide)

    def set_visibility(self, visible: bool) -> None:
        self.controller.set_visibility(visible)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self.controller.subscribe(listener)

    # ------------------------------------------------------------------
    # Persistence channel
    # ------------------------------------------------------------------

    def export(self) -> dict[str, bool]:
        return self.store.snapshot()

    def load_payload(self, text: str, fmt: str = "query") -> int:
        """Merge overrides decoded from *text*; return how many were loaded.

        An undecodable payload is logged and loads nothing.
        """
        try:
            decoder = DECODERS[fmt]
        except KeyError:
            raise ValidationError(
                f"Unknown override payload format {fmt!r}",
                errors=[{"field": "fmt", "allowed": sorted(DECODERS)}],
            ) from None
        try:
            raw = decoder(text)
        except OverridePayloadError as exc:
            logger.warning("flag_override_payload_rejected", fmt=fmt, error=exc.message)
            return 0
        clean = sanitize_overrides(raw)
        self.controller.import_overrides(clean)
        return len(clean)


__all__ = ["DevFlagsSession"]
