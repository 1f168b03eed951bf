"""Default package-manager prefix for the running platform."""

import platform


def default_prefix() -> str:
    """Return the conventional prefix for the current OS and architecture."""
    system = platform.system().lower()
    if system == "darwin":
        return "/opt/homebrew" if platform.machine() == "arm64" else "/usr/local"
    if system == "linux":
        return "/home/linuxbrew/.linuxbrew"
    return "/usr/local"
