"""macOS probe - launchd is always the init system."""

from pathlib import Path

from ..PlatformProbe import PlatformProbe
from .._passwd_login_name import _passwd_login_name


class _Impl(PlatformProbe):
    """macOS-specific probe."""

    LAUNCHCTL = Path("/bin/launchctl")

    def launchctl_path(self) -> Path | None:
        return self.LAUNCHCTL

    def has_systemd(self) -> bool:
        return False

    def _login_name(self) -> str | None:
        return _passwd_login_name(self.uid())
