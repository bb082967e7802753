"""Presenter protocol for output abstraction."""

from typing import Protocol

from sudachi_lookup.models import LookupOutcome


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, tests, etc).

    Lets the lookup command stay independent of where its output goes.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_lookup_outcome(
        self, sentence: str, cursor_index: int, outcome: LookupOutcome
    ) -> None:
        """Display the outcome of one dictionary form lookup.

        Args:
            sentence: The sentence that was looked up
            cursor_index: Cursor position within the sentence
            outcome: The lookup outcome to display
        """
        ...
