"""Tests for the structlog logging bridge."""

from __future__ import annotations

import json
import logging
import sys

import pytest
import structlog

from static_pages.logging_config import configure


@pytest.fixture(autouse=True)
def _reset_logging():
    """Restore the root logger and structlog defaults after each test."""
    root = logging.getLogger()
    old_handlers = root.handlers[:]
    old_level = root.level
    yield
    root.handlers = old_handlers
    root.setLevel(old_level)
    structlog.reset_defaults()


def test_configure_installs_single_stderr_handler() -> None:
    configure()
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.handlers[0].stream is sys.stderr


def test_console_output_is_human_readable(capsys) -> None:
    configure(json_output=False)
    logging.getLogger("test.console").info("hello world")
    err = capsys.readouterr().err
    assert "hello world" in err
    assert not err.strip().startswith("{")


def test_json_output_includes_extra_fields(capsys) -> None:
    configure(json_output=True)
    logging.getLogger("test.json").info("page viewed", extra={"slug": "intro"})
    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert record["event"] == "page viewed"
    assert record["slug"] == "intro"
    assert record["level"] == "info"
    assert record["logger"] == "test.json"


def test_level_is_applied(capsys) -> None:
    configure(json_output=True, level="warning")
    assert logging.getLogger().level == logging.WARNING
    logging.getLogger("test.level").info("hidden")
    assert capsys.readouterr().err == ""
