"""Main CLI entry point for sudachi_lookup."""

import argparse
import logging
import sys

from sudachi_lookup import __version__
from sudachi_lookup.cli.commands import lookup


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="sudachi_lookup",
        description="Look up Japanese dictionary forms through a Sudachi API server",
        epilog="Use 'sudachi_lookup <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # sudachi_lookup lookup <sentence> <cursor> [<cursor> ...]
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Look up the dictionary form at one or more cursor positions",
        description="Resolve the dictionary form (辞書形) of the word under each cursor",
    )
    lookup_parser.add_argument("sentence", help="Sentence containing the target word")
    lookup_parser.add_argument(
        "cursors",
        metavar="cursor",
        type=int,
        nargs="+",
        help="Character index of the cursor (repeat to look up several positions)",
    )
    lookup_parser.add_argument(
        "--url",
        default=None,
        help="Sudachi API endpoint (default: http://127.0.0.1:8000)",
    )
    lookup_parser.add_argument(
        "--timeout-ms",
        type=int,
        default=None,
        help="Request timeout in milliseconds (default: 5000)",
    )
    lookup_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command == "lookup":
        return lookup.lookup_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
