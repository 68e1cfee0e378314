"""Core / service layer — value objects, pure transformations and the
quote service.

Rules
-----
* No ``print()`` calls.
* No direct file access — the store is injected.
* No imports from ``cli`` or ``infra``.
"""

from quotebook.core.models import ConsoleColor, LineStyle, QuoteEntry, ReadOptions, SearchTerms
from quotebook.core.protocols import LineWriter, QuoteStore
from quotebook.core.quote_service import QuoteService
from quotebook.core.validation import FileCheck, resolve_quotes_file

__all__: list[str] = [
    "ConsoleColor",
    "FileCheck",
    "LineStyle",
    "LineWriter",
    "QuoteEntry",
    "QuoteService",
    "QuoteStore",
    "ReadOptions",
    "SearchTerms",
    "resolve_quotes_file",
]
