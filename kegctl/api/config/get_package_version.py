"""Installed kegctl version for ``kegctl --version``."""

import importlib.metadata as importlib_metadata
from functools import lru_cache


@lru_cache(maxsize=1)
def get_package_version() -> str:
    """Version of the installed kegctl distribution, "unknown" when running from a bare checkout."""
    try:
        return importlib_metadata.version("kegctl")
    except importlib_metadata.PackageNotFoundError:
        return "unknown"
