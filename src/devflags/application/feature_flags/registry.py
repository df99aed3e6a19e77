"""Application feature flags – FlagDefinition and FlagRegistry."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator, Mapping

from devflags.kernel.errors import DuplicateFlagError, InvalidFlagKeyError


def validate_key(key: object) -> str:
    """Return *key* unchanged if it is a non-empty string."""
    if not isinstance(key, str) or not key:
        raise InvalidFlagKeyError(key)
    return key


@dataclasses.dataclass(frozen=True)
class FlagDefinition:
    """A flag the application knows about statically.

    ``default_value`` is ``None`` when configuration does not set it.
    """
    key: str
    default_value: bool | None = None
    description: str = ""

    def __post_init__(self) -> None:
        validate_key(self.key)


class FlagRegistry:
    """Immutable, ordered catalog of defined flags."""

    def __init__(self, definitions: Iterable[FlagDefinition] = ()) -> None:
        self._definitions: dict[str, FlagDefinition] = {}
        for definition in definitions:
            if definition.key in self._definitions:
                raise DuplicateFlagError(definition.key)
            self._definitions[definition.key] = definition

    @classmethod
    def from_config(
        cls, keys: Iterable[str], config: Mapping[str, object] | None = None
    ) -> FlagRegistry:
        """Build a registry from flag names and a ``{key: default}`` config.

        Config values other than ``True``/``False`` leave the default unset.
        """
        config = config or {}
        definitions = []
        for key in keys:
            default = config.get(key)
            definitions.append(
                FlagDefinition(key, default if isinstance(default, bool) else None)
            )
        return cls(definitions)

    def default_for(self, key: str) -> bool | None:
        definition = self._definitions.get(key)
        return definition.default_value if definition is not None else None

    def keys(self) -> list[str]:
        return list(self._definitions)

    def __contains__(self, key: object) -> bool:
        return key in self._definitions

    def __iter__(self) -> Iterator[FlagDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"FlagRegistry({self.keys()!r})"


__all__ = ["FlagDefinition", "FlagRegistry", "validate_key"]
