"""Image storage adapters."""

from .local import InMemoryImageStorage, LocalImageStorage

__all__ = ["InMemoryImageStorage", "LocalImageStorage"]
