"""Output writers for ``quotes read``.

Each writer receives its :class:`~quotebook.core.models.LineStyle` up
front and applies it to every line it renders, instead of changing the
terminal's colours for the rest of the session.

Lines are written verbatim: tabs, trailing whitespace and control
characters pass through untouched.  Bytes that were not valid UTF-8 in
the source file are shown as U+FFFD.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from quotebook.cli.console import get_rich_console
from quotebook.core.models import LineStyle
from quotebook.exceptions import EnvironmentError


def _displayable(line: str) -> str:
    """Replace undecodable bytes (surrogate escapes) with U+FFFD."""
    return line.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


class RichLineWriter:
    """Render lines to stdout with a fixed Rich style.

    The style's escape codes are wrapped around the raw line rather than
    going through :meth:`rich.console.Console.print`, whose text
    rendering expands tabs and strips control characters.  The console
    only decides where output goes and which colour system applies; with
    no colour system (stdout is not a terminal) the bare line is written.
    """

    def __init__(self, style: LineStyle, *, rich_console: Any | None = None) -> None:
        try:
            from rich.color import ColorSystem
            from rich.style import Style
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "rich is not installed. Install with: pip install rich",
            ) from exc

        self._console: Any = rich_console or get_rich_console(stderr=False)
        self._style: Any = Style(
            color=style.foreground.rich_name,
            bgcolor=style.background.rich_name,
        )
        self._color_systems: dict[str, Any] = {
            "standard": ColorSystem.STANDARD,
            "256": ColorSystem.EIGHT_BIT,
            "truecolor": ColorSystem.TRUECOLOR,
            "windows": ColorSystem.WINDOWS,
        }

    def write_line(self, line: str) -> None:
        color_system = self._color_systems.get(self._console.color_system or "")
        text = _displayable(line)
        rendered = self._style.render(text, color_system=color_system) if color_system else text
        stream = self._console.file
        stream.write(f"{rendered}\n")
        stream.flush()


class PlainLineWriter:
    """Write lines unstyled to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write_line(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{_displayable(line)}\n")
        stream.flush()


def create_line_writer(style: LineStyle) -> RichLineWriter | PlainLineWriter:
    """Return a Rich writer for *style*, or a plain one without Rich."""
    try:
        return RichLineWriter(style)
    except EnvironmentError:
        return PlainLineWriter()
