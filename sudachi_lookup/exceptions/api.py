"""Sudachi API related exceptions."""

from .base import SudachiLookupException


class SudachiApiError(SudachiLookupException):
    """Raised when the Sudachi API returns something unusable."""

    pass


class ResponseFormatError(SudachiApiError):
    """Raised when a response body does not match the expected schema."""

    pass
