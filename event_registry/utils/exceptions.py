"""Custom exception classes."""


class RegistryError(Exception):
    """Base class for errors raised by the participant registry."""
    pass


class Unauthorized(RegistryError):
    """Raised when a non-organizer invokes a restricted operation."""
    pass


class InvalidAge(RegistryError):
    """Raised when an age or a new minimum age is outside the permitted bounds."""
    pass


class CapacityExceeded(RegistryError):
    """Raised when the registry is full and the caller is a first-time registrant."""
    pass


class NotFound(RegistryError):
    """Raised when a query targets an identifier that never registered."""
    pass
