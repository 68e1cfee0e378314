"""Custom exception hierarchy for quotebook.

Errors the user can fix (bad option values, a missing optional UI
package) inherit from :class:`QuotebookError` and are rendered by the
CLI error boundary as a one-line message plus an optional hint.

Filesystem faults are deliberately **not** wrapped: an ``OSError`` raised
while reading or writing the quotes file propagates unchanged to the
boundary, which reports it as a fatal I/O error.

Hierarchy
---------
QuotebookError
├── InvalidOptionError
└── EnvironmentError
"""

from __future__ import annotations


class QuotebookError(Exception):
    """Base exception for all quotebook errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Option values ---------------------------------------------------------

class InvalidOptionError(QuotebookError):
    """Raised when a typed option value violates its invariant."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(QuotebookError):
    """Raised when an optional runtime dependency is not available."""
