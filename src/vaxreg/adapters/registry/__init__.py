"""Center registry adapters."""

from .memory import InMemoryCenterRegistry

__all__ = ["InMemoryCenterRegistry"]
