"""Application – use-case building blocks."""

from devflags.application.feature_flags import (
    DevFlagsSession,
    FeatureFlagProvider,
    FlagDefinition,
    FlagRegistry,
)

__all__ = [
    "DevFlagsSession",
    "FeatureFlagProvider",
    "FlagDefinition",
    "FlagRegistry",
]
