"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
import traceback
from typing import Any

from quotebook.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def escape_markup(text: object) -> str:
	"""Escape Rich markup in *text*; a no-op when Rich is not installed."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return str(text)
	return escape(str(text))


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance, targeting stderr by default."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def print_exception(self) -> None:
		"""Render the exception being handled as a traceback on stderr."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			traceback.print_exc(file=sys.stderr)
			return
		rich_console.print_exception()


console = _ConsoleProxy()
