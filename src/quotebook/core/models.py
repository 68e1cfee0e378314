"""Domain models for quotebook.

All models are **frozen** dataclasses — immutable value objects built
once per invocation from parsed command-line input and discarded when
the single action completes.  They carry zero I/O.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from quotebook.exceptions import InvalidOptionError


# ---------------------------------------------------------------------------
# Console palette
# ---------------------------------------------------------------------------

class ConsoleColor(str, Enum):
    """The fixed 16-colour console palette accepted by ``--fgcolor``.

    Member values are the display names shown in ``--help`` and error
    messages.  :attr:`rich_name` maps each one onto the ANSI colour Rich
    uses to render it.
    """

    BLACK = "Black"
    DARK_BLUE = "DarkBlue"
    DARK_GREEN = "DarkGreen"
    DARK_CYAN = "DarkCyan"
    DARK_RED = "DarkRed"
    DARK_MAGENTA = "DarkMagenta"
    DARK_YELLOW = "DarkYellow"
    GRAY = "Gray"
    DARK_GRAY = "DarkGray"
    BLUE = "Blue"
    GREEN = "Green"
    CYAN = "Cyan"
    RED = "Red"
    MAGENTA = "Magenta"
    YELLOW = "Yellow"
    WHITE = "White"

    def __str__(self) -> str:
        return self.value

    @property
    def rich_name(self) -> str:
        """ANSI colour name understood by :class:`rich.style.Style`."""
        return _RICH_NAMES[self]

    @classmethod
    def parse(cls, text: str) -> ConsoleColor:
        """Look up a colour by display name or member name, ignoring case.

        ``"DarkBlue"``, ``"darkblue"`` and ``"dark_blue"`` all resolve to
        :attr:`DARK_BLUE`.

        Raises
        ------
        ValueError
            When *text* names no palette colour.
        """
        key = text.strip().replace("_", "").replace("-", "").lower()
        for color in cls:
            if color.value.lower() == key:
                return color
        raise ValueError(f"unknown color: {text!r}")

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(color.value for color in cls)


_RICH_NAMES: dict[ConsoleColor, str] = {
    ConsoleColor.BLACK: "black",
    ConsoleColor.DARK_BLUE: "blue",
    ConsoleColor.DARK_GREEN: "green",
    ConsoleColor.DARK_CYAN: "cyan",
    ConsoleColor.DARK_RED: "red",
    ConsoleColor.DARK_MAGENTA: "magenta",
    ConsoleColor.DARK_YELLOW: "yellow",
    ConsoleColor.GRAY: "white",
    ConsoleColor.DARK_GRAY: "bright_black",
    ConsoleColor.BLUE: "bright_blue",
    ConsoleColor.GREEN: "bright_green",
    ConsoleColor.CYAN: "bright_cyan",
    ConsoleColor.RED: "bright_red",
    ConsoleColor.MAGENTA: "bright_magenta",
    ConsoleColor.YELLOW: "bright_yellow",
    ConsoleColor.WHITE: "bright_white",
}


# ---------------------------------------------------------------------------
# Read options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LineStyle:
    """Colours applied to every line written by ``quotes read``."""

    foreground: ConsoleColor
    background: ConsoleColor


@dataclass(frozen=True, slots=True)
class ReadOptions:
    """Typed values of the ``quotes read`` options."""

    delay_ms: int = 42
    """Milliseconds to wait per character of the line just written."""

    foreground: ConsoleColor = ConsoleColor.WHITE

    light_mode: bool = False
    """White background instead of black."""

    def __post_init__(self) -> None:
        if self.delay_ms < 0:
            raise InvalidOptionError(
                f"Delay must be a non-negative integer, got {self.delay_ms}.",
            )

    @property
    def style(self) -> LineStyle:
        background = ConsoleColor.WHITE if self.light_mode else ConsoleColor.BLACK
        return LineStyle(foreground=self.foreground, background=background)


# ---------------------------------------------------------------------------
# Delete / add inputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SearchTerms:
    """Non-empty, ordered collection of case-sensitive search strings.

    The tuple guarantees immutability.  Convenience dunder methods make
    the collection usable in iteration and length contexts.
    """

    terms: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.terms:
            raise InvalidOptionError(
                "At least one search term is required.",
                hint="Pass one or more values to --search-terms.",
            )

    def __iter__(self) -> Iterator[str]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)


@dataclass(frozen=True, slots=True)
class QuoteEntry:
    """A quote and its byline, appended to the file as one entry."""

    quote: str
    byline: str
