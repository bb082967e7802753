"""Data model for morphological tokens returned by the Sudachi API."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sudachi_lookup.exceptions import ResponseFormatError

from .lookup import LookupResult


def _require_int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ResponseFormatError(f"Token field '{key}' must be an integer, got {value!r}")
    return value


def _require_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ResponseFormatError(f"Token field '{key}' must be a string, got {value!r}")
    return value


@dataclass(frozen=True)
class Token:
    """One morphological unit of an analyzed sentence."""

    surface: str  # Surface form (as it appears in text)
    jishokei: str  # Dictionary form (辞書形)
    start: int  # Character offset, inclusive
    end: int  # Character offset, exclusive

    @classmethod
    def from_dict(cls, data: Any) -> "Token":
        """Build a token from one wire object.

        Args:
            data: Decoded JSON object with surface, jishokei, start and end

        Returns:
            The parsed Token

        Raises:
            ResponseFormatError: If the object does not match the token schema
                or its span is negative or reversed
        """
        if not isinstance(data, Mapping):
            raise ResponseFormatError(f"Token must be an object, got {type(data).__name__}")
        start = _require_int(data, "start")
        end = _require_int(data, "end")
        if start < 0 or end < start:
            raise ResponseFormatError(f"Token span [{start}:{end}] is not a valid range")

        return cls(
            surface=_require_str(data, "surface"),
            jishokei=_require_str(data, "jishokei"),
            start=start,
            end=end,
        )

    @property
    def length(self) -> int:
        """Span length in characters."""
        return self.end - self.start

    def covers(self, cursor_index: int) -> bool:
        """Check whether the cursor falls inside this token's span."""
        return self.start <= cursor_index < self.end

    def to_result(self) -> LookupResult:
        """Map this token to a lookup result."""
        return LookupResult(
            dictionary_form=self.jishokei,
            length=self.length,
            offset=self.start,
        )

    def __str__(self) -> str:
        return f"{self.surface} -> {self.jishokei} [{self.start}:{self.end}]"
