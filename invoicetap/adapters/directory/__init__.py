"""Account directory adapters."""

from .memory import InMemoryAccountDirectory, build_demo_directory

__all__ = ["InMemoryAccountDirectory", "build_demo_directory"]
