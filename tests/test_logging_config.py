"""Tests for the stderr-only logging setup."""

import logging
import sys

import pytest

from user_verification_api.app.core.logging_config import setup_logging


@pytest.fixture
def bare_root(monkeypatch):
    """The root logger with no handlers, restored after the test."""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    yield root
    for handler in root.handlers:
        handler.close()


def test_logs_go_to_stderr(bare_root):
    setup_logging("info")
    assert bare_root.level == logging.INFO
    assert len(bare_root.handlers) == 1
    assert bare_root.handlers[0].stream is sys.stderr


def test_unknown_level_falls_back_to_warning(bare_root):
    setup_logging("chatty")
    assert bare_root.level == logging.WARNING


def test_configures_only_once(bare_root):
    setup_logging("DEBUG")
    setup_logging("ERROR")
    assert bare_root.level == logging.DEBUG
    assert len(bare_root.handlers) == 1


def test_logfile_receives_records(bare_root, tmp_path):
    logfile = tmp_path / "run.log"
    setup_logging("INFO", str(logfile))
    logging.getLogger("user_verification_api.test").info("hello file")
    for handler in bare_root.handlers:
        handler.flush()
    assert "hello file" in logfile.read_text(encoding="utf-8")
