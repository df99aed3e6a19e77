"""
devflags – session-scoped feature-flag overrides for development builds.

Import path convention::

    from devflags.application.feature_flags import DevFlagsSession, FlagRegistry
    from devflags.config.settings import DevFlagsSettings, EnvSettingsLoader
    from devflags.kernel.errors import ValidationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
