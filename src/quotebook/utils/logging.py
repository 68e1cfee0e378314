"""Logging bootstrap.

Rich is preferred for the handler so log records share the look of the
rest of the CLI output; when Rich is missing, a plain ``basicConfig``
formatter is used instead.  Both write to stderr so ``quotes read``
output on stdout stays exactly the file contents.
"""

from __future__ import annotations

import logging

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

_PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def resolve_level(level: str | int, verbosity: int = 0) -> int:
    """Turn a level name (or number) plus ``-v`` count into a logging level.

    Each ``-v`` lowers the threshold by one step (WARNING → INFO → DEBUG);
    the result never goes below DEBUG.
    """
    if isinstance(level, str):
        level = _LEVELS.get(level.upper(), logging.WARNING)
    return max(logging.DEBUG, level - 10 * max(verbosity, 0))


def setup_logging(level: str | int = "WARNING", verbosity: int = 0) -> int:
    """Configure the ``quotebook`` logger and return the effective level."""
    effective = resolve_level(level, verbosity)

    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
        )

    # Re-running setup (tests, repeated main() calls) replaces our handler.
    logger = logging.getLogger("quotebook")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(effective)
    return effective
