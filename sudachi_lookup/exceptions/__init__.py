"""Custom exceptions for Sudachi Lookup."""

from .api import ResponseFormatError, SudachiApiError
from .base import SudachiLookupException
from .validation import ValidationError

__all__ = [
    "SudachiLookupException",
    "ValidationError",
    "SudachiApiError",
    "ResponseFormatError",
]
