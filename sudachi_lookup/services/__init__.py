"""Business logic services for Sudachi Lookup."""

from .sudachi_client import SudachiApiClient

__all__ = ["SudachiApiClient"]
