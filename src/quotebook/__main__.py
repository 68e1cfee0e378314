"""Allow ``python -m quotebook`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m quotebook`` behaves identically to the ``quotebook``
console script.
"""

from __future__ import annotations

from quotebook.cli.app import cli

if __name__ == "__main__":
    cli()
