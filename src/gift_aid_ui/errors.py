"""
Error kinds raised by the review workflow.

Every failure is scoped to the action that triggered it:

- ValidationError: bad input detected before any network call
- TransportError: the remote query or submit call failed
- DataShapeError: a single raw value could not be interpreted
"""


class ReviewError(Exception):
    """Base class for errors surfaced to the user by the review workflow."""

    title = "Error"


class ValidationError(ReviewError):
    """Input rejected before any state change or remote call."""


class TransportError(ReviewError):
    """
    A remote call failed.

    Attributes:
        operation: Short name of the remote operation (e.g. "query", "submit").
    """

    def __init__(self, message: str, operation: str = "") -> None:
        super().__init__(message)
        self.operation = operation


class DataShapeError(ReviewError, ValueError):
    """A raw value could not be converted to the expected shape."""
