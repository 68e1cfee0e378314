"""Runtime configuration for the quotebook CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from quotebook.core.models import ConsoleColor

SAMPLE_FILE_NAME: str = "sampleQuotes.txt"
"""File used when ``--file`` is omitted, resolved against the working directory."""


@dataclass(frozen=True, slots=True)
class ReadDefaults:
    """Defaults for ``quotes read`` options."""

    delay_ms: int = 42
    foreground: ConsoleColor = ConsoleColor.WHITE


@dataclass(frozen=True, slots=True)
class Settings:
    """Application settings."""

    sample_file: Path = Path(SAMPLE_FILE_NAME)
    read: ReadDefaults = field(default_factory=ReadDefaults)
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from the environment.

        Only the log level is configurable; the sample file and read
        defaults are fixed.
        """
        return cls(
            log_level=os.getenv("QUOTEBOOK_LOG_LEVEL", "WARNING").strip().upper() or "WARNING",
        )
