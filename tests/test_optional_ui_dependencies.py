"""Regression tests for running without Rich installed.

Every command must keep working: help and version are plain argparse,
status messages fall back to ``print`` on stderr, and ``quotes read``
falls back to an unstyled writer.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

from quotebook.cli import exit_codes
from quotebook.cli.app import main
from quotebook.cli.console import console, escape_markup, get_rich_console
from quotebook.cli.line_writer import PlainLineWriter, RichLineWriter, create_line_writer
from quotebook.core.models import ReadOptions
from quotebook.exceptions import EnvironmentError
from quotebook.utils.logging import setup_logging


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("rich", "rich.color", "rich.console", "rich.markup", "rich.style", "rich.logging"):
        monkeypatch.setitem(sys.modules, name, None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_get_rich_console_raises_cleanly(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_console_proxy_falls_back_to_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.print("plain message")
    assert capsys.readouterr().err == "plain message\n"


def test_rich_writer_raises_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError):
        RichLineWriter(ReadOptions().style)


def test_writer_factory_falls_back_to_plain(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert isinstance(create_line_writer(ReadOptions().style), PlainLineWriter)


def test_read_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    quotes_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["--file", str(quotes_file), "quotes", "read", "--delay", "0"])
    assert code == exit_codes.SUCCESS
    assert capsys.readouterr().out == "hello world\nfoo bar\nhello foo\n"


def test_delete_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    quotes_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["--file", str(quotes_file), "quotes", "delete", "--search-terms", "foo"])
    assert code == exit_codes.SUCCESS
    assert "Deleting from file" in capsys.readouterr().err


def test_logging_falls_back_to_stream_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    setup_logging("INFO")
    handlers = logging.getLogger("quotebook").handlers
    assert len(handlers) == 1
    assert type(handlers[0]) is logging.StreamHandler


def test_escape_markup_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert escape_markup("[/x]") == "[/x]"
