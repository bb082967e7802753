"""Base exception classes for Sudachi Lookup."""


class SudachiLookupException(Exception):
    """Base exception for all Sudachi Lookup errors.

    All custom exceptions in the sudachi_lookup package should inherit
    from this base class for consistent error handling.
    """

    pass
