"""Interface protocols for Sudachi Lookup."""

from .presenter import PresenterProtocol

__all__ = ["PresenterProtocol"]
