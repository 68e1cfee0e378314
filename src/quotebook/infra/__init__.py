"""Infrastructure layer — filesystem integration.

This layer is the only place that opens the quotes file.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* ``OSError`` is never caught here; it propagates to the CLI boundary.
"""

from quotebook.infra.text_file_store import TextFileStore

__all__: list[str] = ["TextFileStore"]
