"""Application feature flags – session overrides over a static registry."""
from devflags.application.feature_flags.codec import (
    decode_json,
    decode_query,
    encode_json,
    encode_query,
    sanitize_overrides,
)
from devflags.application.feature_flags.controller import (
    OverrideController,
    OverridesChanged,
    Visibility,
    VisibilityChanged,
)
from devflags.application.feature_flags.discovery import DevFlagSource, StaticDevFlagSource
from devflags.application.feature_flags.provider import FeatureFlagProvider, SessionFeatureFlagProvider
from devflags.application.feature_flags.registry import FlagDefinition, FlagRegistry
from devflags.application.feature_flags.resolver import FlagResolver, FlagView
from devflags.application.feature_flags.session import DevFlagsSession
from devflags.application.feature_flags.store import SessionOverrideStore

__all__ = [
    "DevFlagSource",
    "DevFlagsSession",
    "FeatureFlagProvider",
    "FlagDefinition",
    "FlagRegistry",
    "FlagResolver",
    "FlagView",
    "OverrideController",
    "OverridesChanged",
    "SessionFeatureFlagProvider",
    "SessionOverrideStore",
    "StaticDevFlagSource",
    "Visibility",
    "VisibilityChanged",
    "decode_json",
    "decode_query",
    "encode_json",
    "encode_query",
    "sanitize_overrides",
]
