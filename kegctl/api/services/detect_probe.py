"""Select the platform probe for the running OS."""

import platform
from collections.abc import Callable, Mapping

from .PlatformProbe import PlatformProbe

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKENDS: tuple[str, ...] = ("darwin", "linux")
_FALLBACK_BACKEND = "generic"


def detect_os() -> str:
    """Detect the probe backend for the current operating system.

    Returns:
        "darwin", "linux", or "generic" for anything else
    """
    system = platform.system().lower()
    return system if system in _BACKENDS else _FALLBACK_BACKEND


def detect_probe(
    system: str | None = None,
    environ: Mapping[str, str] | None = None,
    geteuid: Callable[[], int] | None = None,
    process_query_timeout: float = 5.0,
) -> PlatformProbe:
    """Instantiate the probe for an OS.

    Args:
        system: Backend name; detected from the running OS when None.
            Unknown names fall back to the generic probe.
        environ: Environment mapping passed to the probe
        geteuid: Effective UID provider passed to the probe
        process_query_timeout: Seconds to wait for the process table query
    """
    backend = detect_os() if system is None else system.lower()
    if backend not in _BACKENDS:
        backend = _FALLBACK_BACKEND

    module = __import__(f"kegctl.api.services._{backend}._Impl", fromlist=[""])
    return module._Impl(environ=environ, geteuid=geteuid, process_query_timeout=process_query_timeout)
