"""
Error taxonomy for the menu catalog.
Not-found is never an exception: lookups return None, delete returns False.
"""
from __future__ import annotations


class MenuServiceError(Exception):
    """Base class for errors raised by the menu catalog."""


class ValidationError(MenuServiceError):
    """Input rejected before any storage access."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class EncodingError(MenuServiceError):
    """A price could not be converted to or from its stored decimal form."""


class PersistenceError(MenuServiceError):
    """The storage layer failed or could not be reached; treat the write as not applied."""
