"""Observability – structured logging helpers."""
from devflags.observability.logging.factory import configure_logging
from devflags.observability.logging.processors import get_logger

__all__ = ["configure_logging", "get_logger"]
