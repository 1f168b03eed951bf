"""Unit tests for kegctl.api.validate_output."""

import pytest
from pydantic import BaseModel

from kegctl.api.validate_output import validate_output


class MockOutput(BaseModel):
    key: str
    optional: str = "default"


def mock_cmd_func():
    pass


# Resemble kegctl.api.<domain>.cmd_<name>
mock_cmd_func.__module__ = "kegctl.api.test_domain.cmd_mock_command"
mock_cmd_func.__name__ = "cmd_mock_command"


def test_validate_output_success(monkeypatch):
    from kegctl.api.schema_registry import schema_registry

    monkeypatch.setattr(schema_registry, "get_output_schema", lambda d, c: MockOutput)

    assert validate_output(mock_cmd_func, {"key": "value"}) == {"key": "value", "optional": "default"}


def test_validate_output_failure(monkeypatch):
    from kegctl.api.schema_registry import schema_registry

    monkeypatch.setattr(schema_registry, "get_output_schema", lambda d, c: MockOutput)

    with pytest.raises(ValueError, match="Output validation failed"):
        validate_output(mock_cmd_func, {"wrong": "value"})


def test_validate_output_skip_non_api():
    def non_api_func():
        pass

    non_api_func.__module__ = "other.module"
    assert validate_output(non_api_func, {"foo": "bar"}) == {"foo": "bar"}


def test_validate_output_skip_non_cmd():
    def helper():
        pass

    helper.__module__ = "kegctl.api.test_domain"
    assert validate_output(helper, {"foo": "bar"}) == {"foo": "bar"}


def test_validate_output_rejects_extra_fields():
    from kegctl.api.services.cmd_user import cmd_user

    output = {"errors": [], "warnings": [], "pid": 1, "user": "root", "extra": True}
    with pytest.raises(ValueError, match="services.user"):
        validate_output(cmd_user, output)
