"""quotebook — a small command-line tool for a plain-text quotes file.

Shows how a command tree (root → ``quotes`` → ``read``/``delete``/``add``)
is declared with argparse and dispatched to simple file operations.
"""

from quotebook.version import __version__

__all__: list[str] = ["__version__"]
