"""Linux probe - systemd when the host was booted with it."""

from pathlib import Path

from ..PlatformProbe import PlatformProbe
from .._passwd_login_name import _passwd_login_name


class _Impl(PlatformProbe):
    """Linux-specific probe.

    systemd creates /run/systemd/system early during boot, so its presence
    identifies a systemd host without running any binary.
    """

    SYSTEMD_MARKER = Path("/run/systemd/system")

    def __init__(self, *args, systemd_marker: Path | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.systemd_marker = self.SYSTEMD_MARKER if systemd_marker is None else systemd_marker

    def launchctl_path(self) -> Path | None:
        return None

    def has_systemd(self) -> bool:
        return self.systemd_marker.is_dir()

    def _login_name(self) -> str | None:
        return _passwd_login_name(self.uid())
