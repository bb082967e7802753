"""Tests for presenter implementations."""

from sudachi_lookup.models import LookupOutcome, LookupResult, LookupStatus
from sudachi_lookup.presenters import ConsolePresenter, NullPresenter


class TestConsolePresenter:
    """Tests for ConsolePresenter output."""

    def test_message_prefixes(self, capsys):
        """Test that each message level has its prefix."""
        presenter = ConsolePresenter()
        presenter.show_info("hello")
        presenter.show_success("done")
        presenter.show_warning("careful")
        presenter.show_error("broken")

        out = capsys.readouterr().out
        assert "hello\n" in out
        assert "[OK] done" in out
        assert "[WARN] careful" in out
        assert "[ERROR] broken" in out

    def test_found_outcome(self, capsys):
        """Test output for a resolved cursor."""
        outcome = LookupOutcome(
            status=LookupStatus.FOUND,
            result=LookupResult("食べる", 2, 5),
            from_cache=True,
        )

        ConsolePresenter().show_lookup_outcome("私は寿司を食べた", 6, outcome)

        out = capsys.readouterr().out
        assert "[OK] [6] 食べ -> 食べる" in out
        assert "offset=5" in out
        assert "length=2" in out
        assert "cache" in out

    def test_not_found_outcome(self, capsys):
        """Test output when no token covers the cursor."""
        outcome = LookupOutcome(status=LookupStatus.NOT_FOUND)

        ConsolePresenter().show_lookup_outcome("食べた", 9, outcome)

        out = capsys.readouterr().out
        assert "[WARN] [9] No token at cursor (api)" in out

    def test_failed_outcome(self, capsys):
        """Test output for a failed lookup."""
        outcome = LookupOutcome(status=LookupStatus.TIMEOUT, error="Request timed out")

        ConsolePresenter().show_lookup_outcome("食べた", 0, outcome)

        out = capsys.readouterr().out
        assert "[ERROR] [0] Lookup failed (timeout): Request timed out" in out


class TestNullPresenter:
    """Tests for NullPresenter."""

    def test_prints_nothing(self, capsys):
        """Test that the null presenter is silent."""
        presenter = NullPresenter()
        presenter.show_info("hello")
        presenter.show_error("broken")
        presenter.show_lookup_outcome("食べた", 0, LookupOutcome(status=LookupStatus.NOT_FOUND))

        assert capsys.readouterr().out == ""
