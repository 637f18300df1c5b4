from enum import StrEnum


class OmniException(Exception):
    """Base class for omni-machines errors.

    This class should not be raised directly, but should be used as a base
    class for all omni-machines errors.
    It handles the __cause__ attribute so the errors could be raised as

    .. code-block:: python

        raise SomeError("message") from original_exception
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        if self.__cause__:
            return f"{self.message} (Caused by: {self.__cause__})"
        return f"{self.message}"


class ConnectionError(OmniException):
    """Raised when a connection to the Omni API fails."""

    pass


class ConfigurationError(OmniException):
    """Raised when a configuration error exists."""

    pass


class ErrorKind(StrEnum):
    """Kinds of failures reported by the resource store."""

    NOT_FOUND = "not_found"
    """The resource does not exist"""

    CONFLICT = "conflict"
    """The expected version does not match the current resource version"""

    ALREADY_EXISTS = "already_exists"
    """A resource with the same identity has already been created"""

    OTHER = "other"
    """Any other store failure"""


class ResourceError(OmniException):
    """Raised when a resource store call fails."""

    kind: ErrorKind = ErrorKind.OTHER

    def __init__(self, message: str, kind: ErrorKind | None = None):
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class ResourceNotFoundError(ResourceError):
    """Raised when the requested resource does not exist."""

    kind = ErrorKind.NOT_FOUND


class ResourceConflictError(ResourceError):
    """Raised when an update is rejected because the resource changed concurrently."""

    kind = ErrorKind.CONFLICT


class ResourceAlreadyExistsError(ResourceError):
    """Raised when creating a resource whose id is already taken."""

    kind = ErrorKind.ALREADY_EXISTS
