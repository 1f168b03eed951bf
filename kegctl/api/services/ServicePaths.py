"""Service definition paths for the active init system."""

from pathlib import Path

from .MissingEnvironmentVariable import MissingEnvironmentVariable
from .PlatformProbe import PlatformProbe


class ServicePaths:
    """Resolve where service definition files live.

    launchd is checked before systemd. With neither, every path is None;
    callers must treat that as an unsupported platform, not an error.
    """

    LAUNCHD_BOOT_PATH = Path("/Library/LaunchDaemons")
    SYSTEMD_BOOT_PATH = Path("/usr/lib/systemd/system")

    def __init__(self, probe: PlatformProbe):
        self.probe = probe

    def boot_path(self) -> Path | None:
        """System-wide directory for daemons started at boot."""
        if self.probe.has_launchctl():
            return self.LAUNCHD_BOOT_PATH
        if self.probe.has_systemd():
            return self.SYSTEMD_BOOT_PATH
        return None

    def user_path(self) -> Path | None:
        """Per-user directory for session services.

        Raises:
            MissingEnvironmentVariable: If HOME is unset on a supported platform
        """
        if self.probe.has_launchctl():
            return self._home() / "Library" / "LaunchAgents"
        if self.probe.has_systemd():
            return self._home() / ".config" / "systemd" / "user"
        return None

    def path(self) -> Path | None:
        """Boot path when running as root, user path otherwise."""
        if self.probe.is_root():
            return self.boot_path()
        return self.user_path()

    def _home(self) -> Path:
        home = self.probe.environ.get("HOME")
        if not home:
            raise MissingEnvironmentVariable("HOME")
        return Path(home)
