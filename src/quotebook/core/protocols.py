"""Protocols (interfaces) consumed by the core layer.

These define the contracts that the storage adapter and the output
writers must satisfy.  Core code depends ONLY on these protocols —
never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Protocol


class QuoteStore(Protocol):
    """Contract for the line-oriented quotes file backend.

    Implementations let ``OSError`` propagate unchanged; there is no
    retry, locking or atomic replace.
    """

    def iter_lines(self, path: Path) -> Iterator[str]:
        """Yield the lines of *path* lazily, without line terminators.

        The returned iterator is single-pass.
        """
        ...  # pragma: no cover

    def overwrite_lines(self, path: Path, lines: Iterable[str]) -> None:
        """Replace the contents of *path* with *lines*, one per line."""
        ...  # pragma: no cover

    def append_text(self, path: Path, text: str) -> None:
        """Append *text* to *path*, creating the file when absent.

        The handle must be closed before returning, on success and
        failure alike.
        """
        ...  # pragma: no cover


class LineWriter(Protocol):
    """Contract for anything that displays one line of output.

    Styling is fixed at construction time; the writer never mutates
    shared terminal state.
    """

    def write_line(self, line: str) -> None:
        ...  # pragma: no cover
