"""CLI application entry point and command routing for quotebook.

This module is the **sole error boundary** for the entire application.
It catches :class:`~quotebook.exceptions.QuotebookError`,
``KeyboardInterrupt``, ``OSError`` and any unexpected ``Exception``,
rendering messages via Rich and returning well-defined exit codes.

Command tree
------------
::

    quotebook [--file PATH]
    └── quotes                 (group, no action)
        ├── read               [--delay N] [--fgcolor COLOR] [--light-mode]
        ├── delete             --search-terms TERM [TERM ...]
        └── add | insert       QUOTE BYLINE

Architecture notes
------------------
* ``--file`` is declared once on a parent parser and attached to every
  level, so it is accepted before or after any command name.
* Every check (argparse, the ``--file`` existence rule, the typed option
  invariants) completes before an action touches the file.
* Actions never pick an exit code; a completed action is ``SUCCESS``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from quotebook.cli import exit_codes
from quotebook.cli.console import console, escape_markup
from quotebook.cli.line_writer import create_line_writer
from quotebook.config import SAMPLE_FILE_NAME, Settings
from quotebook.core.models import ConsoleColor, QuoteEntry, ReadOptions, SearchTerms
from quotebook.core.quote_service import QuoteService
from quotebook.core.validation import resolve_quotes_file
from quotebook.exceptions import QuotebookError
from quotebook.infra.text_file_store import TextFileStore
from quotebook.utils.logging import setup_logging
from quotebook.version import __version__

logger = logging.getLogger(__name__)

Handler = Callable[[QuoteService, Path, argparse.Namespace], int]


# ---------------------------------------------------------------------------
# Option value types
# ---------------------------------------------------------------------------

def _non_negative_int(text: str) -> int:
    """argparse ``type=`` for ``--delay``."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {value}")
    return value


def _console_color(text: str) -> ConsoleColor:
    """argparse ``type=`` for ``--fgcolor``."""
    try:
        return ConsoleColor.parse(text)
    except ValueError:
        choices = ", ".join(ConsoleColor.names())
        raise argparse.ArgumentTypeError(
            f"invalid choice: {text!r} (choose from {choices})",
        ) from None


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _file_option_parent() -> argparse.ArgumentParser:
    """Parent parser carrying the recursive ``--file`` option.

    ``SUPPRESS`` keeps a nested parser from overwriting a value given at
    an outer level, so ``--file`` is only present on the namespace when
    the user typed it.
    """
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--file",
        metavar="PATH",
        default=argparse.SUPPRESS,
        help=f"The quotes file. Must exist when given; defaults to {SAMPLE_FILE_NAME}.",
    )
    return parent


def _build_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    """Construct the full command tree."""
    settings = settings or Settings()
    file_parent = _file_option_parent()

    parser = argparse.ArgumentParser(
        prog="quotebook",
        description="Sample app for argparse: work with a file of quotes.",
        parents=[file_parent],
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log more detail to stderr (repeat for debug output).",
    )

    commands = parser.add_subparsers(metavar="<command>")
    quotes = commands.add_parser(
        "quotes",
        parents=[file_parent],
        help="Work with a file that contains quotes.",
        description="Work with a file that contains quotes.",
    )
    actions = quotes.add_subparsers(metavar="<action>", required=True)

    # -- read ---------------------------------------------------------------
    read = actions.add_parser(
        "read",
        parents=[file_parent],
        help="Read and display the file.",
        description="Read and display the file.",
    )
    read.add_argument(
        "--delay",
        type=_non_negative_int,
        default=settings.read.delay_ms,
        metavar="N",
        help=(
            "Delay between lines, specified as milliseconds per character "
            "in a line (default: %(default)s)."
        ),
    )
    read.add_argument(
        "--fgcolor",
        type=_console_color,
        default=settings.read.foreground,
        metavar="COLOR",
        help=(
            "Foreground color of text displayed on the console: one of "
            f"{', '.join(ConsoleColor.names())} (default: %(default)s)."
        ),
    )
    read.add_argument(
        "--light-mode",
        action="store_true",
        help=(
            "Background color of text displayed on the console: "
            "default is black, light mode is white."
        ),
    )
    read.set_defaults(handler=_handle_read, command_parser=read)

    # -- delete -------------------------------------------------------------
    delete = actions.add_parser(
        "delete",
        parents=[file_parent],
        help="Delete lines from the file.",
        description="Delete every line that contains any of the search terms.",
    )
    delete.add_argument(
        "--search-terms",
        nargs="+",
        action="extend",
        required=True,
        metavar="TERM",
        help="Strings to search for when deleting entries.",
    )
    delete.set_defaults(handler=_handle_delete, command_parser=delete)

    # -- add / insert -------------------------------------------------------
    add = actions.add_parser(
        "add",
        aliases=["insert"],
        parents=[file_parent],
        help="Add an entry to the file.",
        description="Add an entry to the file.",
    )
    add.add_argument("quote", help="Text of quote.")
    add.add_argument("byline", help="Byline of quote.")
    add.set_defaults(handler=_handle_add, command_parser=add)

    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_read(service: QuoteService, path: Path, args: argparse.Namespace) -> int:
    """Dispatch ``quotes read``."""
    options = ReadOptions(
        delay_ms=args.delay,
        foreground=args.fgcolor,
        light_mode=args.light_mode,
    )
    writer = create_line_writer(options.style)
    service.read(path, options, writer)
    return exit_codes.SUCCESS


def _handle_delete(service: QuoteService, path: Path, args: argparse.Namespace) -> int:
    """Dispatch ``quotes delete``."""
    terms = SearchTerms(tuple(args.search_terms))
    console.print("Deleting from file")
    removed = service.delete(path, terms)
    console.print(f"Removed {removed} line(s).")
    return exit_codes.SUCCESS


def _handle_add(service: QuoteService, path: Path, args: argparse.Namespace) -> int:
    """Dispatch ``quotes add`` / ``quotes insert``."""
    entry = QuoteEntry(quote=args.quote, byline=args.byline)
    console.print("Adding to file")
    service.add(path, entry)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the quotebook CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.  Parse and ``--file`` validation failures
        raise ``SystemExit`` with :data:`exit_codes.USAGE_ERROR` instead.
    """
    settings = Settings.from_env()
    parser = _build_parser(settings)
    args = parser.parse_args(argv)
    setup_logging(settings.log_level, args.verbose)

    handler: Handler | None = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return exit_codes.SUCCESS

    check = resolve_quotes_file(getattr(args, "file", None), default=settings.sample_file)
    if not check.ok or check.path is None:
        args.command_parser.error(check.error or "invalid --file")

    logger.debug("Using quotes file %s", check.path)
    service = QuoteService(TextFileStore())
    return handler(service, check.path, args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except QuotebookError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except OSError as exc:
        console.print_exception()
        console.print(f"[bold red]I/O error:[/bold red] {escape_markup(exc)}")
        sys.exit(exit_codes.IO_ERROR)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
