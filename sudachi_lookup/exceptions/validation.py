"""Validation-related exceptions."""

from .base import SudachiLookupException


class ValidationError(SudachiLookupException):
    """Raised when configuration validation fails."""

    pass
