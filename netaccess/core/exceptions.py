"""Custom exception classes for the access control core."""


class NetAccessError(Exception):
    """Base exception for the access control core."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class InvalidInputError(NetAccessError):
    """Raised when an entity ID is empty or malformed."""
    pass


class AlreadyExistsError(NetAccessError):
    """Raised when creating an entity whose ID is already taken."""
    pass


class NotFoundError(NetAccessError):
    """Raised when a requested record is not found."""
    pass


class RoleInUseError(NetAccessError):
    """Raised when a role is still referenced by a user or group."""
    pass


class DecodeError(NetAccessError):
    """Raised when a stored payload cannot be parsed."""
    pass


class StorageError(NetAccessError):
    """Raised when the record store backend fails."""
    pass
