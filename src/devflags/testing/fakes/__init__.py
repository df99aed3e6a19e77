"""Testing fakes."""
from devflags.testing.fakes.channel import InMemoryOverrideChannel

__all__ = ["InMemoryOverrideChannel"]
