"""Validation of the ``--file`` option.

Kept out of the argparse declarations so the rule can be tested on its
own and called explicitly by the dispatcher before any action runs.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

FILE_DOES_NOT_EXIST: str = "File does not exist"


@dataclass(frozen=True, slots=True)
class FileCheck:
    """Outcome of resolving the ``--file`` option.

    Exactly one of :attr:`path` and :attr:`error` is set.
    """

    path: Path | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def resolve_quotes_file(
    token: str | None,
    *,
    default: Path,
    exists: Callable[[Path], bool] = Path.is_file,
) -> FileCheck:
    """Resolve the raw ``--file`` token into a path.

    Rules
    -----
    * No token: *default* is returned unchecked (``add`` creates it on
      first use; ``read``/``delete`` fail later if it is missing).
    * A token naming an existing regular file: that path.
    * Any other token: an error result carrying
      :data:`FILE_DOES_NOT_EXIST`.
    """
    if token is None:
        return FileCheck(path=default)
    candidate = Path(token)
    if not exists(candidate):
        return FileCheck(path=None, error=FILE_DOES_NOT_EXIST)
    return FileCheck(path=candidate)
