"""Unit tests for kegctl.api.services.ServicePaths."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from kegctl.api.services import MissingEnvironmentVariable, ServicePaths

pytestmark = pytest.mark.services


def _probe(launchctl: bool, systemd: bool, root: bool = False, home: str | None = "/tmp_home") -> MagicMock:
    probe = MagicMock()
    probe.has_launchctl.return_value = launchctl
    probe.has_systemd.return_value = systemd
    probe.is_root.return_value = root
    probe.environ = {} if home is None else {"HOME": home}
    return probe


class TestBootPath:
    def test_launchd(self):
        assert ServicePaths(_probe(True, False)).boot_path() == Path("/Library/LaunchDaemons")

    def test_systemd(self):
        assert ServicePaths(_probe(False, True)).boot_path() == Path("/usr/lib/systemd/system")

    def test_unknown(self):
        assert ServicePaths(_probe(False, False)).boot_path() is None

    def test_launchd_wins_over_systemd(self):
        assert ServicePaths(_probe(True, True)).boot_path() == Path("/Library/LaunchDaemons")


class TestUserPath:
    def test_launchd(self):
        assert str(ServicePaths(_probe(True, False)).user_path()) == "/tmp_home/Library/LaunchAgents"

    def test_systemd(self):
        assert str(ServicePaths(_probe(False, True)).user_path()) == "/tmp_home/.config/systemd/user"

    def test_unknown(self):
        assert ServicePaths(_probe(False, False)).user_path() is None

    def test_missing_home_raises(self):
        with pytest.raises(MissingEnvironmentVariable, match="HOME"):
            ServicePaths(_probe(False, True, home=None)).user_path()

    def test_missing_home_on_unsupported_platform_is_not_an_error(self):
        assert ServicePaths(_probe(False, False, home=None)).user_path() is None

    def test_reads_home_at_call_time(self):
        probe = _probe(True, False)
        paths = ServicePaths(probe)
        probe.environ = {"HOME": "/other"}
        assert str(paths.user_path()) == "/other/Library/LaunchAgents"


class TestPath:
    @pytest.mark.parametrize(
        ("launchctl", "systemd", "root", "expected"),
        [
            (True, False, False, "/tmp_home/Library/LaunchAgents"),
            (True, False, True, "/Library/LaunchDaemons"),
            (False, True, False, "/tmp_home/.config/systemd/user"),
            (False, True, True, "/usr/lib/systemd/system"),
        ],
    )
    def test_relevant_path(self, launchctl, systemd, root, expected):
        assert str(ServicePaths(_probe(launchctl, systemd, root=root)).path()) == expected

    @pytest.mark.parametrize("root", [True, False])
    def test_unknown(self, root):
        assert ServicePaths(_probe(False, False, root=root)).path() is None
