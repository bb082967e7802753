"""Configuration classes for Sudachi Lookup."""

from dataclasses import dataclass

from sudachi_lookup.exceptions import ValidationError


@dataclass(frozen=True)
class SudachiLookupConfig:
    """Immutable configuration for the Sudachi API client.

    Frozen so a client can share it with worker threads without copying.
    """

    # Sudachi API settings
    api_url: str = "http://127.0.0.1:8000"
    timeout_ms: int = 5000  # Client-side bound on each request

    def __post_init__(self):
        """Validate settings."""
        if not isinstance(self.api_url, str) or not self.api_url.strip():
            raise ValidationError("api_url must be a non-empty string")
        if isinstance(self.timeout_ms, bool) or not isinstance(self.timeout_ms, int):
            raise ValidationError(f"timeout_ms must be an integer, got {self.timeout_ms!r}")
        if self.timeout_ms <= 0:
            raise ValidationError(f"timeout_ms must be positive, got {self.timeout_ms}")

    @property
    def timeout_seconds(self) -> float:
        """Request timeout in seconds, as requests expects it."""
        return self.timeout_ms / 1000
