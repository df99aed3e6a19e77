"""Config validation errors."""
from __future__ import annotations

from devflags.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or constructed."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting is present but outside its allowed values.

    ``setting_name`` is the dataclass field; ``allowed`` lists accepted
    values when the field is an enumeration such as a log level.
    """
    default_code = "invalid_setting_value"

    def __init__(
        self, setting_name: str, value: object, allowed: list[str] | None = None
    ) -> None:
        message = f"Setting '{setting_name}' does not accept {value!r}"
        if allowed:
            message += f" (allowed: {', '.join(allowed)})"
        super().__init__(
            message,
            detail={"setting": setting_name, "value": repr(value), "allowed": allowed or []},
        )
        self.setting_name = setting_name
        self.value = value
        self.allowed = allowed or []


__all__ = ["ConfigError", "InvalidSettingValueError"]
