"""Plain-text implementation of :class:`~quotebook.core.protocols.QuoteStore`.

Files are read and written as UTF-8 in text mode, so line terminators
are normalised to ``"\\n"`` on the way in and translated to the platform
convention on the way out.

A leading UTF-8 byte-order mark is dropped on read.  Bytes that are not
valid UTF-8 are carried as surrogate escapes, so ``delete`` writes them
back unchanged instead of failing on a Latin-1 or mixed-encoding file.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

READ_ENCODING: str = "utf-8-sig"
WRITE_ENCODING: str = "utf-8"
ERRORS: str = "surrogateescape"


class TextFileStore:
    """Concrete :class:`QuoteStore` over newline-delimited text files.

    This class satisfies the :class:`~quotebook.core.protocols.QuoteStore`
    protocol structurally — no explicit inheritance required.
    """

    def iter_lines(self, path: Path) -> Iterator[str]:
        """Yield lines lazily; the file stays open until iteration ends."""
        with path.open(encoding=READ_ENCODING, errors=ERRORS) as handle:
            for raw in handle:
                yield raw.removesuffix("\n")

    def overwrite_lines(self, path: Path, lines: Iterable[str]) -> None:
        """Truncate *path* and write each line followed by a newline."""
        with path.open("w", encoding=WRITE_ENCODING, errors=ERRORS) as handle:
            for line in lines:
                handle.write(f"{line}\n")

    def append_text(self, path: Path, text: str) -> None:
        with path.open("a", encoding=WRITE_ENCODING, errors=ERRORS) as handle:
            handle.write(text)
