"""Configuration management for Sudachi Lookup."""

from .config import SudachiLookupConfig
from .defaults import create_default_config

__all__ = ["SudachiLookupConfig", "create_default_config"]
