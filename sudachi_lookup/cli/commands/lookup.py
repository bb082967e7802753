"""CLI command for looking up dictionary forms."""

from sudachi_lookup.config import create_default_config
from sudachi_lookup.exceptions import SudachiLookupException
from sudachi_lookup.interfaces import PresenterProtocol
from sudachi_lookup.presenters import ConsolePresenter
from sudachi_lookup.services import SudachiApiClient


def lookup_command(args, presenter: PresenterProtocol | None = None) -> int:
    """Execute the lookup subcommand.

    Every cursor goes through the same client, so positions after the
    first are answered from the sentence cache.

    Args:
        args: Parsed command-line arguments
        presenter: Output target (defaults to the console)

    Returns:
        Exit code (0 = every cursor resolved, 1 = otherwise)
    """
    presenter = presenter or ConsolePresenter()

    overrides = {}
    if args.url is not None:
        overrides["api_url"] = args.url
    if args.timeout_ms is not None:
        overrides["timeout_ms"] = args.timeout_ms

    try:
        config = create_default_config(**overrides)
    except SudachiLookupException as e:
        presenter.show_error(f"Invalid configuration: {e}")
        return 1

    client = SudachiApiClient(config)
    presenter.show_info(f"Sentence: {args.sentence}")

    resolved = 0
    for cursor_index in args.cursors:
        outcome = client.lookup(args.sentence, cursor_index)
        presenter.show_lookup_outcome(args.sentence, cursor_index, outcome)
        if outcome.found:
            resolved += 1

    return 0 if resolved == len(args.cursors) else 1
