"""Tests for settings (config.py) and logging bootstrap (utils/logging.py)."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from quotebook.config import SAMPLE_FILE_NAME, Settings
from quotebook.core.models import ConsoleColor
from quotebook.utils.logging import resolve_level, setup_logging


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.sample_file == Path(SAMPLE_FILE_NAME)
        assert settings.read.delay_ms == 42
        assert settings.read.foreground is ConsoleColor.WHITE
        assert settings.log_level == "WARNING"

    def test_from_env_default_level(self) -> None:
        assert Settings.from_env().log_level == "WARNING"

    def test_from_env_reads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUOTEBOOK_LOG_LEVEL", " info ")
        assert Settings.from_env().log_level == "INFO"

    def test_blank_env_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUOTEBOOK_LOG_LEVEL", "  ")
        assert Settings.from_env().log_level == "WARNING"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class TestResolveLevel:
    @pytest.mark.parametrize(
        ("level", "verbosity", "expected"),
        [
            ("WARNING", 0, logging.WARNING),
            ("WARNING", 1, logging.INFO),
            ("WARNING", 2, logging.DEBUG),
            ("WARNING", 5, logging.DEBUG),
            ("error", 0, logging.ERROR),
            ("nonsense", 0, logging.WARNING),
            (logging.CRITICAL, 1, logging.ERROR),
            ("INFO", -3, logging.INFO),
        ],
    )
    def test_levels(self, level: str | int, verbosity: int, expected: int) -> None:
        assert resolve_level(level, verbosity) == expected


class TestSetupLogging:
    def test_installs_single_rich_handler(self) -> None:
        setup_logging("INFO")
        setup_logging("INFO")
        logger = logging.getLogger("quotebook")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.level == logging.INFO

    def test_returns_effective_level(self) -> None:
        assert setup_logging("WARNING", verbosity=2) == logging.DEBUG

    def test_service_logs_reach_caplog(
        self, quotes_file: Path, caplog: pytest.LogCaptureFixture,
    ) -> None:
        from quotebook.core.models import SearchTerms
        from quotebook.core.quote_service import QuoteService
        from quotebook.infra.text_file_store import TextFileStore

        with caplog.at_level(logging.INFO, logger="quotebook"):
            QuoteService(TextFileStore()).delete(quotes_file, SearchTerms(("hello",)))
        assert "Removed 2 of 3 line(s)" in caplog.text
