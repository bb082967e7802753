"""Null presenter for testing (no output)."""

from sudachi_lookup.models import LookupOutcome


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_lookup_outcome(
        self, sentence: str, cursor_index: int, outcome: LookupOutcome
    ) -> None:
        """Display the outcome of one dictionary form lookup (no-op)."""
        pass
