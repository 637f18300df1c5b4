from .exceptions import (
    ConfigurationError,
    ConnectionError,
    ErrorKind,
    OmniException,
    ResourceAlreadyExistsError,
    ResourceConflictError,
    ResourceError,
    ResourceNotFoundError,
)

__all__ = [
    "ConfigurationError",
    "ConnectionError",
    "ErrorKind",
    "OmniException",
    "ResourceAlreadyExistsError",
    "ResourceConflictError",
    "ResourceError",
    "ResourceNotFoundError",
]
