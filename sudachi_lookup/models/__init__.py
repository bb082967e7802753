"""Data models for Sudachi Lookup."""

from .lookup import CacheState, LookupOutcome, LookupResult, LookupStatus
from .token import Token

__all__ = [
    "Token",
    "CacheState",
    "LookupResult",
    "LookupStatus",
    "LookupOutcome",
]
