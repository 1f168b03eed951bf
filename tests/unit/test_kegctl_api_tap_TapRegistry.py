"""Unit tests for kegctl.api.tap.TapRegistry."""

import pytest

from kegctl.api.tap import Tap, TapNoCustomRemoteError, TapRegistry, TapRemoteMismatchError
from kegctl.api.tap.TapRegistry import ALREADY_TAPPED, METADATA_FILE, REMOTE_CHANGED, TAPPED

pytestmark = pytest.mark.tap


@pytest.fixture
def registry(tmp_path):
    return TapRegistry(tmp_path / "Taps")


def test_installed_empty_when_missing(registry):
    assert registry.installed() == []


def test_installed_sorted_and_filtered(registry):
    for path in ["zed/homebrew-tools", "acme/homebrew-core", "acme/not-a-tap", "acme/homebrew-"]:
        (registry.taps_dir / path).mkdir(parents=True)
    (registry.taps_dir / "stray-file").write_text("")

    assert [tap.name for tap in registry.installed()] == ["acme/core", "zed/tools"]


def test_install_records_default_remote(registry):
    tap = Tap.fetch("user/repo")

    assert registry.install(tap) == TAPPED
    assert registry.is_installed(tap)
    assert registry.remote(tap) == "https://github.com/user/homebrew-repo"
    assert registry.installed() == [tap]


def test_install_with_url(registry):
    tap = Tap.fetch("user/repo")
    registry.install(tap, clone_target="git@example.com:user/repo.git")
    assert registry.remote(tap) == "git@example.com:user/repo.git"


def test_install_twice_is_noop(registry):
    tap = Tap.fetch("user/repo")
    registry.install(tap)
    assert registry.install(tap) == ALREADY_TAPPED


def test_install_remote_mismatch(registry):
    tap = Tap.fetch("user/repo")
    registry.install(tap)
    with pytest.raises(TapRemoteMismatchError, match="remote mismatch"):
        registry.install(tap, clone_target="https://mirror.example.com/repo")
    assert registry.remote(tap) == tap.default_remote


def test_install_custom_remote_replaces(registry):
    tap = Tap.fetch("user/repo")
    registry.install(tap)
    assert registry.install(tap, clone_target="https://mirror.example.com/repo", custom_remote=True) == REMOTE_CHANGED
    assert registry.remote(tap) == "https://mirror.example.com/repo"


def test_install_custom_remote_requires_url(registry):
    with pytest.raises(TapNoCustomRemoteError):
        registry.install(Tap.fetch("user/repo"), custom_remote=True)


def test_remote_ignores_unreadable_metadata(registry):
    tap = Tap.fetch("user/repo")
    registry.install(tap)
    (tap.path(registry.taps_dir) / METADATA_FILE).write_text("{broken")
    assert registry.remote(tap) is None
    # Falls back to the default remote
    assert registry.install(tap) == ALREADY_TAPPED


def test_remote_ignores_metadata_it_cannot_read(registry, caplog):
    tap = Tap.fetch("user/repo")
    (tap.path(registry.taps_dir) / METADATA_FILE).mkdir(parents=True)

    assert registry.remote(tap) is None
    assert "unreadable tap metadata" in caplog.text


def test_installed_skips_mixed_case_directories(registry, caplog):
    for path in ["Foo/homebrew-bar", "acme/homebrew-Core", "acme/homebrew-tools"]:
        (registry.taps_dir / path).mkdir(parents=True)

    assert [tap.name for tap in registry.installed()] == ["acme/tools"]
    assert "Foo/homebrew-bar" in caplog.text
    assert "homebrew-Core" in caplog.text
