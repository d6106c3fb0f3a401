"""
Exceptions raised by phototriage.
"""


class PhototriageError(Exception):
    """Base application exception."""

    pass


class InvalidInputError(PhototriageError):
    """Raised when a required input path is missing or has the wrong type."""

    pass
