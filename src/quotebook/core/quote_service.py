"""Core quote service — the three file actions behind ``quotes``.

This service delegates all file access to a
:class:`~quotebook.core.protocols.QuoteStore` and all display to a
:class:`~quotebook.core.protocols.LineWriter`, both injected.  It is
responsible for:

* Pacing ``read`` output line by line.
* Filtering lines for ``delete``.
* Formatting the entry appended by ``add``.

Guarantees
----------
* No ``open()`` and no ``print()``.
* ``OSError`` from the store propagates unchanged.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path

from quotebook.core.line_ops import format_entry, pacing_seconds, remove_matching
from quotebook.core.models import QuoteEntry, ReadOptions, SearchTerms
from quotebook.core.protocols import LineWriter, QuoteStore

logger = logging.getLogger(__name__)


class QuoteService:
    """Stateless service that runs one action against a quotes file.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`QuoteStore` protocol.
    """

    def __init__(self, store: QuoteStore) -> None:
        self._store: QuoteStore = store

    def read(
        self,
        path: Path,
        options: ReadOptions,
        writer: LineWriter,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> int:
        """Write every line of *path* to *writer*, pausing after each.

        The pause is ``options.delay_ms × len(line)`` milliseconds and
        blocks the calling thread.  Returns the number of lines written.
        """
        count = 0
        for line in self._store.iter_lines(path):
            writer.write_line(line)
            count += 1
            pause = pacing_seconds(line, options.delay_ms)
            if pause > 0:
                sleep(pause)
        logger.debug("Displayed %d line(s) from %s", count, path)
        return count

    def delete(self, path: Path, terms: SearchTerms) -> int:
        """Drop every line of *path* containing any of *terms*.

        The whole file is read before it is rewritten.  There is no
        temp-file swap: an interrupted write can leave it truncated.
        Returns the number of removed lines.
        """
        lines = list(self._store.iter_lines(path))
        kept = remove_matching(lines, terms)
        self._store.overwrite_lines(path, kept)
        removed = len(lines) - len(kept)
        logger.info("Removed %d of %d line(s) from %s", removed, len(lines), path)
        return removed

    def add(self, path: Path, entry: QuoteEntry) -> None:
        """Append *entry* to *path*, creating the file if needed."""
        self._store.append_text(path, format_entry(entry))
        logger.info("Appended quote by %r to %s", entry.byline, path)
