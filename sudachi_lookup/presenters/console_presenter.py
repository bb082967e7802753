"""Console presenter for CLI output."""

from sudachi_lookup.models import LookupOutcome, LookupStatus


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_lookup_outcome(
        self, sentence: str, cursor_index: int, outcome: LookupOutcome
    ) -> None:
        """Display the outcome of one dictionary form lookup."""
        source = "cache" if outcome.from_cache else "api"

        if outcome.found and outcome.result is not None:
            result = outcome.result
            span = sentence[result.offset : result.offset + result.length]
            self.show_success(
                f"[{cursor_index}] {span} -> {result.dictionary_form} "
                f"(offset={result.offset}, length={result.length}, {source})"
            )
        elif outcome.status is LookupStatus.NOT_FOUND:
            self.show_warning(f"[{cursor_index}] No token at cursor ({source})")
        else:
            detail = f": {outcome.error}" if outcome.error else ""
            self.show_error(f"[{cursor_index}] Lookup failed ({outcome.status.value}){detail}")
