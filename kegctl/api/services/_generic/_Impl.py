"""Probe for platforms without a supported init system."""

from pathlib import Path

from ..PlatformProbe import PlatformProbe


class _Impl(PlatformProbe):
    """Fallback probe: neither launchd nor systemd, no login name fallback."""

    def launchctl_path(self) -> Path | None:
        return None

    def has_systemd(self) -> bool:
        return False
