"""Init system enumeration."""

from enum import Enum


class InitSystem(str, Enum):
    """Service supervisor managing background services on the host."""

    LAUNCHD = "launchd"
    SYSTEMD = "systemd"
    NONE = "none"
