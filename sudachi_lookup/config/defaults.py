"""Default configuration values for Sudachi Lookup."""

from .config import SudachiLookupConfig


def create_default_config(**overrides) -> SudachiLookupConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        SudachiLookupConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            api_url="http://localhost:9000",
            timeout_ms=2000,
        )
    """
    return SudachiLookupConfig(**overrides)
