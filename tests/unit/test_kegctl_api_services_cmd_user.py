"""Unit tests for kegctl.api.services.cmd_user module."""

import subprocess
from types import SimpleNamespace

import pytest

from kegctl.api.services import cmd_user
from kegctl.api.services.detect_probe import detect_probe
from tests.conftest import run_cmd

pytestmark = pytest.mark.services


@pytest.fixture
def probe(monkeypatch):
    probe = detect_probe(system="generic", environ={"USER": "alice"}, geteuid=lambda: 501)
    monkeypatch.setattr(cmd_user, "_load_probe", lambda: probe)
    return probe


def test_cmd_user_current_user(probe):
    result = run_cmd(cmd_user.cmd_user)

    assert result.success is True
    assert result.output["user"] == "alice"
    assert result.output["pid"] == -1


def test_cmd_user_for_pid(probe, monkeypatch):
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kw: SimpleNamespace(stdout="USER\nroot\n"))

    result = run_cmd(cmd_user.cmd_user, pid=1)

    assert result.success is True
    assert result.output == {"errors": [], "warnings": [], "pid": 1, "user": "root"}


def test_cmd_user_no_such_process(probe, monkeypatch):
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kw: SimpleNamespace(stdout="USER\n"))

    result = run_cmd(cmd_user.cmd_user, pid=99999)

    assert result.success is False
    assert result.output["user"] == ""
    assert "99999" in result.output["errors"][0]


def test_cmd_user_without_user_variable(monkeypatch):
    probe = detect_probe(system="generic", environ={}, geteuid=lambda: 501)
    monkeypatch.setattr(cmd_user, "_load_probe", lambda: probe)

    result = run_cmd(cmd_user.cmd_user)

    assert result.success is False
    assert "USER" in result.output["errors"][0]
