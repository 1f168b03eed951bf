"""launchctl domain target for the current session."""

from .PlatformProbe import PlatformProbe


def domain_target(probe: PlatformProbe) -> str:
    """Return "system" for root, otherwise "gui/<uid>"."""
    if probe.is_root():
        return "system"
    return f"gui/{probe.uid()}"
