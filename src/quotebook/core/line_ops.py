"""Pure line transformations used by the quote actions.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.
"""

from __future__ import annotations

from collections.abc import Iterable

from quotebook.core.models import QuoteEntry, SearchTerms


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------

def matches_any(line: str, terms: SearchTerms) -> bool:
    """Return ``True`` when at least one term is a substring of *line*.

    Matching is case-sensitive.
    """
    return any(term in line for term in terms)


def remove_matching(lines: Iterable[str], terms: SearchTerms) -> list[str]:
    """Keep only the lines that contain none of *terms*, in original order."""
    return [line for line in lines if not matches_any(line, terms)]


# ---------------------------------------------------------------------------
# Add
# ---------------------------------------------------------------------------

def format_entry(entry: QuoteEntry) -> str:
    """Render *entry* as the text appended to the quotes file.

    Two line breaks, the quote, two line breaks, then the byline prefixed
    with ``-``, terminated by a line break.  ``"\\n"`` is written in text
    mode, so the platform line terminator ends up on disk.
    """
    return f"\n\n{entry.quote}\n\n-{entry.byline}\n"


# ---------------------------------------------------------------------------
# Read
# ---------------------------------------------------------------------------

def pacing_seconds(line: str, delay_ms: int) -> float:
    """Seconds to pause after displaying *line*: ``delay_ms × len(line)`` ms."""
    return delay_ms * len(line) / 1000
