"""Data models for lookup results and the sentence cache."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .token import Token


class LookupStatus(Enum):
    """How a single lookup ended."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    HTTP_ERROR = "http_error"
    TRANSPORT_ERROR = "transport_error"
    INVALID_RESPONSE = "invalid_response"


@dataclass(frozen=True)
class LookupResult:
    """Dictionary form of the word under the cursor."""

    dictionary_form: str
    length: int  # Length of the source span in characters
    offset: int  # Start of the source span in the sentence

    def __str__(self) -> str:
        return f"{self.dictionary_form} (offset={self.offset}, length={self.length})"


@dataclass(frozen=True)
class LookupOutcome:
    """Tagged result of a lookup, including why nothing was found."""

    status: LookupStatus
    result: LookupResult | None = None
    from_cache: bool = False
    status_code: int | None = None  # HTTP status for HTTP_ERROR
    error: str | None = None

    @property
    def found(self) -> bool:
        """Check if a dictionary form was resolved."""
        return self.status is LookupStatus.FOUND

    @property
    def failed(self) -> bool:
        """Check if the lookup failed, as opposed to finding no token."""
        return self.status not in (LookupStatus.FOUND, LookupStatus.NOT_FOUND)

    def __str__(self) -> str:
        source = "cache" if self.from_cache else "api"
        return f"LookupOutcome({self.status.value}, source={source}, result={self.result})"


@dataclass(frozen=True)
class CacheState:
    """The last successfully analyzed sentence and its tokens.

    Held by reference and replaced as a whole, never mutated in place.
    """

    sentence: str
    tokens: tuple[Token, ...]

    def find_token(self, cursor_index: int) -> Token | None:
        """Return the first token covering the cursor, in original order."""
        for token in self.tokens:
            if token.covers(cursor_index):
                return token
        return None
