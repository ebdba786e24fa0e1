"""
Exception types raised by the library.
"""


class AbstractionLibError(ValueError):
    """Base class for all library errors."""


class ValidationError(AbstractionLibError):
    """Raised when caller input is malformed or out of range."""


class InvalidDateError(ValidationError):
    """Raised when a value cannot be read as a calendar date."""


class InvalidRangeError(AbstractionLibError):
    """Raised when a date range ends before it starts."""
