"""Pytest configuration and shared fixtures."""

import json
from unittest.mock import MagicMock

import pytest

from sudachi_lookup.config import SudachiLookupConfig
from sudachi_lookup.presenters import NullPresenter
from sudachi_lookup.services import SudachiApiClient


@pytest.fixture
def test_config():
    """Provide a test configuration pointing at a dummy server."""
    return SudachiLookupConfig(
        api_url="http://sudachi.test:8000",
        timeout_ms=250,  # Reduced for tests
    )


@pytest.fixture
def client(test_config):
    """Provide a client with an empty cache."""
    return SudachiApiClient(test_config)


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def make_token_dict():
    """Factory fixture for wire-format token objects."""

    def _make(surface="食べた", jishokei="食べる", start=0, end=3):
        return {"surface": surface, "jishokei": jishokei, "start": start, "end": end}

    return _make


@pytest.fixture
def make_response():
    """Factory fixture for mock requests.Response objects."""

    def _make(body=None, status_code=200, raw_body=None):
        resp = MagicMock()
        resp.status_code = status_code
        if raw_body is None:
            raw_body = json.dumps(body, ensure_ascii=False).encode("utf-8")
        resp.iter_content.return_value = [raw_body]
        return resp

    return _make


@pytest.fixture
def tabeta_body(make_token_dict):
    """Response body for the sentence 食べた with the cursor on the verb."""
    token = make_token_dict()
    return {"tokens": [token], "current": token}


class RecordingPresenter:
    """A real PresenterProtocol implementation that records all calls for assertion."""

    def __init__(self):
        self.infos = []
        self.successes = []
        self.warnings = []
        self.errors = []
        self.outcomes = []

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_success(self, message: str) -> None:
        self.successes.append(message)

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_lookup_outcome(self, sentence, cursor_index, outcome) -> None:
        self.outcomes.append((sentence, cursor_index, outcome))


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()
