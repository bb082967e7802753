"""Client for the Sudachi morphological analysis API."""

import json
import logging
import time
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any

import requests

from sudachi_lookup.config import SudachiLookupConfig, create_default_config
from sudachi_lookup.exceptions import ResponseFormatError
from sudachi_lookup.models import (
    CacheState,
    LookupOutcome,
    LookupResult,
    LookupStatus,
    Token,
)

logger = logging.getLogger(__name__)


class SudachiApiClient:
    """Look up dictionary forms through the Sudachi API.

    Keeps the tokens of the most recently analyzed sentence, so moving the
    cursor within the same sentence never hits the network again.
    """

    def __init__(self, config: SudachiLookupConfig | None = None):
        """Initialize the client.

        Args:
            config: API settings (defaults to a local server on port 8000)
        """
        self.config = config or create_default_config()
        self._cache: CacheState | None = None

    @property
    def cached_sentence(self) -> str | None:
        """Sentence whose tokens are currently cached, if any."""
        cache = self._cache
        return cache.sentence if cache is not None else None

    @property
    def cached_tokens(self) -> tuple[Token, ...] | None:
        """Tokens of the cached sentence, if any."""
        cache = self._cache
        return cache.tokens if cache is not None else None

    def clear_cache(self) -> None:
        """Forget the cached sentence and its tokens."""
        self._cache = None

    def get_dictionary_form(self, sentence: str, cursor_index: int) -> LookupResult | None:
        """Get the dictionary form (辞書形) of the word at the cursor position.

        Args:
            sentence: The sentence containing the target text
            cursor_index: Character index of the cursor in the sentence

        Returns:
            LookupResult with dictionary form, source length and offset,
            or None if no token covers the cursor or the request failed
        """
        return self.lookup(sentence, cursor_index).result

    def lookup(self, sentence: str, cursor_index: int) -> LookupOutcome:
        """Resolve the token at the cursor, reporting how the lookup ended.

        Args:
            sentence: The sentence containing the target text
            cursor_index: Character index of the cursor in the sentence

        Returns:
            LookupOutcome describing the result or the failure

        Note:
            This method never raises. Failures leave the cache untouched.
        """
        # Read the snapshot once so a concurrent swap can't mix two states
        cache = self._cache
        if cache is not None and cache.sentence == sentence:
            token = cache.find_token(cursor_index)
            logger.debug(f"Cache hit for cursor {cursor_index}: {token}")
            if token is None:
                return LookupOutcome(status=LookupStatus.NOT_FOUND, from_cache=True)
            return LookupOutcome(
                status=LookupStatus.FOUND,
                result=token.to_result(),
                from_cache=True,
            )

        return self._request(sentence, cursor_index)

    def _request(self, sentence: str, cursor_index: int) -> LookupOutcome:
        """Ask the API to analyze the sentence and refresh the cache.

        The request runs on a worker thread and is raced against the
        deadline; if the deadline wins, the worker's result is discarded.

        Args:
            sentence: The sentence to analyze
            cursor_index: Character index of the cursor in the sentence

        Returns:
            LookupOutcome for the cursor position
        """
        deadline = time.monotonic() + self.config.timeout_seconds
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="sudachi-request")

        try:
            future = executor.submit(self._fetch, sentence, cursor_index, deadline)
            status_code, body = future.result(timeout=max(deadline - time.monotonic(), 0))

            if not 200 <= status_code < 300:
                logger.warning(f"Sudachi API error: {status_code}")
                return LookupOutcome(
                    status=LookupStatus.HTTP_ERROR,
                    status_code=status_code,
                    error=f"HTTP {status_code}",
                )

            tokens, current = self._parse_response(json.loads(body))

        except (FutureTimeoutError, requests.exceptions.Timeout):
            logger.error(
                f"Sudachi API request timed out after {self.config.timeout_ms} ms"
            )
            return LookupOutcome(status=LookupStatus.TIMEOUT, error="Request timed out")
        except requests.RequestException as e:
            logger.error(f"Sudachi API request failed: {e}")
            return LookupOutcome(status=LookupStatus.TRANSPORT_ERROR, error=str(e))
        except (ResponseFormatError, ValueError) as e:
            logger.error(f"Invalid Sudachi API response: {e}")
            return LookupOutcome(status=LookupStatus.INVALID_RESPONSE, error=str(e))
        finally:
            # Don't wait for an abandoned worker; it stops at its own deadline check
            executor.shutdown(wait=False, cancel_futures=True)

        # Only a fully parsed response replaces the cache
        self._cache = CacheState(sentence=sentence, tokens=tokens)
        logger.debug(f"Cached {len(tokens)} tokens for new sentence")

        if current is None:
            return LookupOutcome(status=LookupStatus.NOT_FOUND)
        return LookupOutcome(status=LookupStatus.FOUND, result=current.to_result())

    def _fetch(self, sentence: str, cursor_index: int, deadline: float) -> tuple[int, bytes]:
        """POST the sentence and read the body, giving up at the deadline.

        Args:
            sentence: The sentence to analyze
            cursor_index: Character index of the cursor in the sentence
            deadline: time.monotonic() value after which the request is aborted

        Returns:
            Tuple of (status code, raw body); the body is empty for non-2xx

        Raises:
            requests.exceptions.Timeout: If the deadline passes mid-response
            requests.RequestException: On transport failures
        """
        remaining = max(deadline - time.monotonic(), 0.001)
        response = requests.post(
            self.config.api_url,
            json={"sentence": sentence, "cursor_index": cursor_index},
            headers={"Content-Type": "application/json"},
            timeout=(remaining, remaining),
            stream=True,
        )

        try:
            if not 200 <= response.status_code < 300:
                return response.status_code, b""

            chunks = []
            for chunk in response.iter_content(chunk_size=4096):
                if time.monotonic() >= deadline:
                    raise requests.exceptions.Timeout("Deadline passed while reading response")
                chunks.append(chunk)
            return response.status_code, b"".join(chunks)
        finally:
            response.close()

    @staticmethod
    def _parse_response(data: Any) -> tuple[tuple[Token, ...], Token | None]:
        """Validate a decoded response body.

        Args:
            data: Decoded JSON body

        Returns:
            Tuple of (all tokens, token at the cursor or None)

        Raises:
            ResponseFormatError: If the body does not match the schema
        """
        if not isinstance(data, Mapping):
            raise ResponseFormatError(f"Response must be an object, got {type(data).__name__}")

        raw_tokens = data.get("tokens")
        if not isinstance(raw_tokens, list):
            raise ResponseFormatError("Response field 'tokens' must be a list")

        tokens = tuple(Token.from_dict(item) for item in raw_tokens)

        raw_current = data.get("current")
        current = Token.from_dict(raw_current) if raw_current is not None else None

        return tokens, current
