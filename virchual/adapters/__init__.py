"""Adapters implementing the renderer protocols."""

from virchual.adapters.memory_renderer import MemoryRenderer

__all__ = ["MemoryRenderer"]
