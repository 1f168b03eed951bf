"""Unit tests for kegctl.api.config.KegConfig module."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from kegctl.api.config.KegConfig import KegConfig
from kegctl.api.services.ServicesConfig import ServicesConfig

pytestmark = pytest.mark.config


class TestKegConfigLoad:
    def test_load_valid_config(self, prefix):
        config = KegConfig.load()

        assert config.prefix == str(prefix)
        assert config.taps_dir == prefix / "Library" / "Taps"
        assert config.cellar_dir == prefix / "Cellar"
        assert config.services.process_query_timeout == 2.0

    def test_load_missing_file_uses_defaults(self, kegctl_home):
        config = KegConfig.load()

        assert config.prefix
        assert config.services.process_query_timeout == 5.0

    def test_load_invalid_json(self, kegctl_home):
        (kegctl_home / "config.json").write_text("{invalid json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            KegConfig.load()

    def test_load_non_object(self, kegctl_home):
        (kegctl_home / "config.json").write_text("[]")
        with pytest.raises(ValueError, match="JSON object"):
            KegConfig.load()

    def test_load_unknown_field(self, kegctl_home):
        (kegctl_home / "config.json").write_text(json.dumps({"bogus": 1}))
        with pytest.raises(ValueError, match="Configuration validation error: bogus"):
            KegConfig.load()

    def test_load_invalid_timeout(self, kegctl_home):
        (kegctl_home / "config.json").write_text(json.dumps({"services": {"process_query_timeout": 0}}))
        with pytest.raises(ValueError, match="services.process_query_timeout"):
            KegConfig.load()


def test_get_home_dir_from_environment(kegctl_home):
    assert KegConfig.get_home_dir() == kegctl_home.resolve()
    assert KegConfig.get_config_path() == kegctl_home.resolve() / "config.json"


def test_get_home_dir_default(monkeypatch):
    monkeypatch.delenv("KEGCTL_HOME")
    assert KegConfig.get_home_dir() == Path.home() / ".kegctl"


def test_to_dict_round_trips():
    config = KegConfig(prefix="/opt/homebrew")
    assert KegConfig(**config.to_dict()) == config


def test_services_config_rejects_negative_timeout():
    with pytest.raises(ValidationError):
        ServicesConfig(process_query_timeout=-1)
