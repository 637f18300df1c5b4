from .service import IfVersion, ResourceService, ResourceStore, Unconditional, UpdatePrecondition

__all__ = ["IfVersion", "ResourceService", "ResourceStore", "Unconditional", "UpdatePrecondition"]
