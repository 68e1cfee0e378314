"""Shared pytest fixtures and configuration for the quotebook test suite.

Guidelines
----------
* Every file lives under ``tmp_path`` — the repository's own
  ``sampleQuotes.txt`` is never touched.
* Pacing sleeps are either disabled (``--delay 0``) or injected.
* Output must not depend on the terminal the tests run in.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

SAMPLE_LINES: list[str] = [
    "hello world",
    "foo bar",
    "hello foo",
]


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from emitting colour codes into captured output."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.delenv("QUOTEBOOK_LOG_LEVEL", raising=False)


@pytest.fixture
def quotes_file(tmp_path: Path) -> Path:
    """A quotes file holding :data:`SAMPLE_LINES`."""
    path = tmp_path / "quotes.txt"
    path.write_text("".join(f"{line}\n" for line in SAMPLE_LINES), encoding="utf-8")
    return path


@pytest.fixture
def in_tmp_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with *tmp_path* as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_quotebook_logger() -> Iterator[None]:
    """Drop handlers installed by ``setup_logging`` during a test."""
    yield
    logger = logging.getLogger("quotebook")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
