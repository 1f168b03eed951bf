"""Unit tests for kegctl.logging_config."""

import logging

import pytest

from kegctl.logging_config import log_level_from_env, setup_logging


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, logging.WARNING), ("debug", logging.DEBUG), (" Info ", logging.INFO), ("chatty", logging.WARNING)],
)
def test_log_level_from_env(monkeypatch, value, expected):
    if value is None:
        monkeypatch.delenv("KEGCTL_LOG_LEVEL", raising=False)
    else:
        monkeypatch.setenv("KEGCTL_LOG_LEVEL", value)
    assert log_level_from_env() == expected


def test_setup_logging_writes_under_kegctl_home(kegctl_home, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging(level=logging.INFO)
    logging.getLogger("kegctl.test").info("hello")
    for handler in root.handlers:
        handler.flush()

    log_file = kegctl_home / "logs" / "kegctl.log"
    assert "hello" in log_file.read_text()
    for handler in root.handlers:
        handler.close()
