from .memory import MemoryResourceService

__all__ = ["MemoryResourceService"]
