"""Config settings – DevFlagsSettings."""
import dataclasses
from typing import ClassVar

from devflags.config.settings.base import Settings
from devflags.config.validation.errors import InvalidSettingValueError

LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})


@dataclasses.dataclass
class DevFlagsSettings(Settings):
    """Session bootstrap settings, read from ``DEVFLAGS_*`` variables.

    ``dev_flags`` lists flags discovered outside the registry,
    ``initial_overrides`` seeds the session in query form
    (``"a=true,b=false"``) and ``visible`` opens the override surface
    at session start. ``log_level`` and ``json_logs`` are applied by
    :meth:`DevFlagsSession.from_settings` through ``configure_logging``.
    """

    _prefix: ClassVar[str] = "DEVFLAGS"

    dev_flags: list[str] = dataclasses.field(default_factory=list)
    initial_overrides: str = ""
    visible: bool = False
    log_level: str = "INFO"
    json_logs: bool = True

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, sorted(LOG_LEVELS))


__all__ = ["DevFlagsSettings"]
